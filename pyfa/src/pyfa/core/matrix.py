from __future__ import annotations

import numpy as np
from scipy.sparse import coo_matrix, csr_matrix

from pyfa.core.table import TransitionTable


def state_index(states: tuple[str, ...]) -> dict[str, int]:
    return {state: idx for idx, state in enumerate(states)}


def build_incidence(
    table: TransitionTable,
    states: tuple[str, ...],
) -> dict[str, csr_matrix]:
    """
    One 0/1 (n_states x n_states) CSR matrix per symbol.

    Entry [i, j] is set iff states[i] has an edge to states[j] on the symbol.
    """
    index = state_index(states)
    n = len(states)
    rows: dict[str, list[int]] = {symbol: [] for symbol in table.alphabet()}
    cols: dict[str, list[int]] = {symbol: [] for symbol in table.alphabet()}

    for (source, symbol), dests in table.items():
        for dest in dests:
            rows[symbol].append(index[source])
            cols[symbol].append(index[dest])

    matrices: dict[str, csr_matrix] = {}
    for symbol in rows:
        row = np.asarray(rows[symbol], dtype=np.int64)
        col = np.asarray(cols[symbol], dtype=np.int64)
        data = np.ones(row.size, dtype=np.float64)
        coo = coo_matrix((data, (row, col)), shape=(n, n), dtype=np.float64)
        matrices[symbol] = csr_matrix(coo)

    return matrices
