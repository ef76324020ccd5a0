from cpkit.centroid_tree import CentroidTree
from cpkit.graph import UndirectedGraph


def _path(n):
    g = UndirectedGraph(n)
    for i in range(n - 1):
        g.add_edge(i, i + 1)
    return g


def _depth(par, u):
    d = 0
    while par[u] != -1:
        u = par[u]
        d += 1
    return d


def test_path_of_five():
    ct = CentroidTree(5)
    ct.build_tree(_path(5), 0)
    assert ct.par == [1, 2, -1, 2, 3]


def test_apply_called_once_per_vertex():
    calls = []
    g = _path(9)
    ct = CentroidTree(9)
    ct.build_tree(g, 0, lambda c, rt: calls.append((c, rt)))
    assert sorted(c for c, _ in calls) == list(range(9))
    assert calls[0][1] == 0


def test_depth_is_logarithmic():
    n = 15
    ct = CentroidTree(n)
    ct.build_tree(_path(n), 0)
    assert max(_depth(ct.par, u) for u in range(n)) <= 3


def test_subtree_sizes_from_dfs():
    g = UndirectedGraph(6)
    for v in range(1, 6):
        g.add_edge(v // 2, v)
    ct = CentroidTree(6)
    ct.dfs(g, 0)
    assert ct.sz[0] == 6
    assert ct.sz[1] == 1 + ct.sz[2] - ct.sz[2] + sum(ct.sz[c] for c in (2, 3) if c // 2 == 1)


def test_star_centroid_is_center():
    g = UndirectedGraph(5)
    for leaf in range(1, 5):
        g.add_edge(0, leaf)
    ct = CentroidTree(5)
    ct.dfs(g, 3)
    assert ct.find_centroid(g, 3) == 0


def test_pe_is_edge_to_parent_component():
    g = _path(7)
    ct = CentroidTree(7)
    ct.build_tree(g, 0)
    for u in range(7):
        if ct.par[u] == -1:
            assert ct.pe[u] == -1
        else:
            e = g.edges[ct.pe[u]]
            assert ct.par[u] in (e.frm, e.to)


def test_removed_root_is_skipped_and_rebuild():
    g = _path(5)
    ct = CentroidTree(5)
    ct.build_tree(g, 0)
    first = list(ct.par)
    calls = []
    ct.build_tree(g, 4, lambda c, rt: calls.append(c))
    assert calls == []
    ct.iter += 1
    ct.build_tree(g, 0)
    assert ct.par == first