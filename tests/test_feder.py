import json

import pytest

from knowhere.feder import (
    ClusterInfo,
    DiskANNBuildConfig,
    DiskANNFederResult,
    DiskANNMeta,
    DiskANNVisitInfo,
    HNSWFederResult,
    HNSWMeta,
    HNSWVisitInfo,
    IVFFlatMeta,
    LevelLinkGraph,
    LevelVisitRecord,
    TopCandidateInfo,
)


def test_diskann_meta_keys_and_round_trip():
    params = DiskANNBuildConfig("/tmp/data", 48, 128, 0.25, 4.0, 8, 0, True)
    meta = DiskANNMeta(params, 1000, [7, 9])
    d = meta.to_dict()
    assert set(d) == {"build_params_", "num_elem_", "entry_points_"}
    assert d["build_params_"]["data_path"] == "/tmp/data"
    assert d["build_params_"]["accelerate_build"] is True
    assert d["entry_points_"] == [7, 9]
    assert json.loads(json.dumps(d)) == d


def test_diskann_visit_info_records():
    info = DiskANNVisitInfo()
    info.set_query_config(5, 32, 4)
    info.add_top_candidate_info(3, 0.5)
    info.add_top_candidate_neighbor(3, 11, 1.5)
    info.add_top_candidate_neighbor(3, 12, 2.5)
    d = info.to_dict()
    assert d["query_params_"] == {"k": 5, "search_list_size": 32, "beamwidth": 4}
    assert d["infos_"] == [
        {"id_": 3, "real_distance_from_q_": 0.5, "neighbors_": [[11, 1.5], [12, 2.5]]}
    ]
    assert json.loads(json.dumps(d)) == d


def test_diskann_neighbor_for_wrong_candidate_raises():
    info = DiskANNVisitInfo()
    info.add_top_candidate_info(3, 0.5)
    with pytest.raises(ValueError):
        info.add_top_candidate_neighbor(4, 11, 1.5)
    assert info.infos[0].neighbors == []


def test_diskann_neighbor_without_candidate_raises():
    with pytest.raises(ValueError):
        DiskANNVisitInfo().add_top_candidate_neighbor(1, 2, 0.1)


def test_top_candidate_add_neighbor():
    cand = TopCandidateInfo(1, 0.25)
    cand.add_neighbor(2, 0.75)
    assert cand.neighbors == [(2, 0.75)]


def test_hnsw_meta_graph():
    meta = HNSWMeta(200, 16, 500, 3, 42, 2)
    meta.add_level_link_graph(2)
    meta.add_node_info(2, 42, [1, 2, 3])
    meta.add_level_link_graph(1)
    meta.add_node_info(1, 1, iter([42]))
    d = meta.to_dict()
    assert d["M_"] == 16
    assert d["enter_point_id_"] == 42
    assert d["overview_hier_graph_"] == [
        {"level_": 2, "nodes_": [{"id_": 42, "neighbors_": [1, 2, 3]}]},
        {"level_": 1, "nodes_": [{"id_": 1, "neighbors_": [42]}]},
    ]
    assert json.loads(json.dumps(d)) == d


def test_hnsw_meta_wrong_level_raises():
    meta = HNSWMeta()
    meta.add_level_link_graph(2)
    with pytest.raises(ValueError):
        meta.add_node_info(1, 5, [6])
    with pytest.raises(ValueError):
        HNSWMeta().add_node_info(0, 5, [6])


def test_level_link_graph_copies_links():
    links = [1, 2]
    graph = LevelLinkGraph(0)
    graph.add_node_info(9, links)
    links.append(3)
    assert graph.nodes[0].neighbors == [1, 2]


def test_hnsw_visit_info():
    info = HNSWVisitInfo()
    info.add_level_visit_record(1)
    info.add_visit_record(1, 4, 5, 0.5)
    info.add_level_visit_record(0)
    info.add_visit_record(0, 5, 6, 0.25)
    d = info.to_dict()
    assert d["infos_"] == [
        {"level_": 1, "records_": [[4, 5, 0.5]]},
        {"level_": 0, "records_": [[5, 6, 0.25]]},
    ]
    with pytest.raises(ValueError):
        info.add_visit_record(1, 0, 0, 0.0)


def test_level_visit_record():
    rec = LevelVisitRecord(3)
    rec.add_visit_record(1, 2, 0.5)
    assert rec.records == [(1, 2, 0.5)]


def test_ivfflat_meta():
    meta = IVFFlatMeta(2, 3, 4)
    node_ids = [0, 2]
    meta.add_cluster(0, node_ids, [0.5, 1.0, 1.5])
    node_ids.append(3)
    d = meta.to_dict()
    assert d["clusters_"] == [{"id_": 0, "node_ids_": [0, 2], "centroid_vec_": [0.5, 1.0, 1.5]}]
    assert (d["nlist_"], d["dim_"], d["ntotal_"]) == (2, 3, 4)
    assert json.loads(json.dumps(d)) == d


def test_ivfflat_wrong_dim_raises():
    meta = IVFFlatMeta(1, 3, 1)
    with pytest.raises(ValueError):
        meta.add_cluster(0, [0], [1.0, 2.0])
    assert meta.clusters == []


def test_cluster_info_defaults():
    assert ClusterInfo() == ClusterInfo(0, [], [])


def test_feder_results_are_independent():
    a, b = HNSWFederResult(), HNSWFederResult()
    a.id_set.add(1)
    assert b.id_set == set()
    c, e = DiskANNFederResult(), DiskANNFederResult()
    c.visit_info.add_top_candidate_info(1, 0.5)
    assert e.visit_info.infos == []