"""Records of index structure and search visits, for visualisation tools."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Sequence


def _check_last(items: list, attr: str, expected: int, what: str) -> Any:
    """Return the last record of ``items`` after checking it belongs to ``expected``."""
    if not items:
        raise ValueError(f"no {what} has been started")
    last = items[-1]
    actual = getattr(last, attr)
    if actual != expected:
        raise ValueError(f"current {what} is {actual}, not {expected}")
    return last


# DiskANN: index view


@dataclass
class DiskANNBuildConfig:
    """Parameters a DiskANN index was built with."""

    data_path: str = ""
    max_degree: int = 0
    search_list_size: int = 0
    pq_code_budget_gb: float = 0.0
    build_dram_budget_gb: float = 0.0
    num_threads: int = 0
    disk_pq_dims: int = 0
    accelerate_build: bool = False


@dataclass
class DiskANNMeta:
    """Overview of a built DiskANN index."""

    build_params: DiskANNBuildConfig = field(default_factory=DiskANNBuildConfig)
    num_elem: int = 0
    entry_ids: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.entry_ids = [int(i) for i in self.entry_ids]

    def to_dict(self) -> dict[str, Any]:
        return {
            "build_params_": asdict(self.build_params),
            "num_elem_": self.num_elem,
            "entry_points_": list(self.entry_ids),
        }


# DiskANN: search view


@dataclass
class DiskANNQueryConfig:
    """Parameters of one DiskANN query."""

    k: int = 0
    search_list_size: int = 0
    beamwidth: int = 0


@dataclass
class TopCandidateInfo:
    """A candidate reached during search, with the neighbours examined from it."""

    id: int = 0
    distance: float = 0.0
    neighbors: list[tuple[int, float]] = field(default_factory=list)

    def add_neighbor(self, node_id: int, distance: float) -> None:
        self.neighbors.append((node_id, distance))

    def _to_dict(self) -> dict[str, Any]:
        return {
            "id_": self.id,
            "real_distance_from_q_": self.distance,
            "neighbors_": [[nid, dist] for nid, dist in self.neighbors],
        }


@dataclass
class DiskANNVisitInfo:
    """Trace of a DiskANN search."""

    query_params: DiskANNQueryConfig = field(default_factory=DiskANNQueryConfig)
    infos: list[TopCandidateInfo] = field(default_factory=list)

    def set_query_config(self, k: int, search_list_size: int, beamwidth: int) -> None:
        self.query_params = DiskANNQueryConfig(k, search_list_size, beamwidth)

    def add_top_candidate_info(self, node_id: int, distance: float) -> None:
        self.infos.append(TopCandidateInfo(node_id, distance))

    def add_top_candidate_neighbor(self, node_id: int, neighbor_id: int, distance: float) -> None:
        """Add a neighbour to the latest candidate, which must be ``node_id``."""
        _check_last(self.infos, "id", node_id, "candidate").add_neighbor(neighbor_id, distance)

    def to_dict(self) -> dict[str, Any]:
        return {
            "query_params_": asdict(self.query_params),
            "infos_": [info._to_dict() for info in self.infos],
        }


@dataclass
class DiskANNFederResult:
    visit_info: DiskANNVisitInfo = field(default_factory=DiskANNVisitInfo)
    id_set: set[int] = field(default_factory=set)


# HNSW: index view


@dataclass
class NodeInfo:
    """A node and the ids it links to."""

    id: int = 0
    neighbors: list[int] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        return {"id_": self.id, "neighbors_": list(self.neighbors)}


@dataclass
class LevelLinkGraph:
    """The links of the nodes on one level of the graph."""

    level: int = 0
    nodes: list[NodeInfo] = field(default_factory=list)

    def add_node_info(self, node_id: int, links: Iterable[int]) -> None:
        self.nodes.append(NodeInfo(node_id, list(links)))

    def _to_dict(self) -> dict[str, Any]:
        return {"level_": self.level, "nodes_": [node._to_dict() for node in self.nodes]}


@dataclass
class HNSWMeta:
    """Overview of a built HNSW index and its upper levels."""

    ef_construction: int = 0
    m: int = 0
    num_elem: int = 0
    num_levels: int = 0
    enter_point_id: int = 0
    num_overview_levels: int = 0
    overview_hier_graph: list[LevelLinkGraph] = field(default_factory=list)

    def add_level_link_graph(self, level: int) -> None:
        self.overview_hier_graph.append(LevelLinkGraph(level))

    def add_node_info(self, level: int, node_id: int, links: Iterable[int]) -> None:
        """Add a node to the latest level graph, which must be ``level``."""
        _check_last(self.overview_hier_graph, "level", level, "level").add_node_info(node_id, links)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ef_construction_": self.ef_construction,
            "M_": self.m,
            "num_elem_": self.num_elem,
            "num_levels_": self.num_levels,
            "enter_point_id_": self.enter_point_id,
            "num_overview_levels_": self.num_overview_levels,
            "overview_hier_graph_": [graph._to_dict() for graph in self.overview_hier_graph],
        }


# HNSW: search view


@dataclass
class LevelVisitRecord:
    """Edges followed on one level during a search."""

    level: int = 0
    records: list[tuple[int, int, float]] = field(default_factory=list)

    def add_visit_record(self, id_from: int, id_to: int, distance: float) -> None:
        self.records.append((id_from, id_to, distance))

    def _to_dict(self) -> dict[str, Any]:
        return {"level_": self.level, "records_": [list(record) for record in self.records]}


@dataclass
class HNSWVisitInfo:
    """Trace of an HNSW search, level by level."""

    infos: list[LevelVisitRecord] = field(default_factory=list)

    def add_level_visit_record(self, level: int) -> None:
        self.infos.append(LevelVisitRecord(level))

    def add_visit_record(self, level: int, id_from: int, id_to: int, distance: float) -> None:
        """Add an edge to the latest level record, which must be ``level``."""
        _check_last(self.infos, "level", level, "level").add_visit_record(id_from, id_to, distance)

    def to_dict(self) -> dict[str, Any]:
        return {"infos_": [info._to_dict() for info in self.infos]}


@dataclass
class HNSWFederResult:
    visit_info: HNSWVisitInfo = field(default_factory=HNSWVisitInfo)
    id_set: set[int] = field(default_factory=set)


# IVF-Flat: index view


@dataclass
class ClusterInfo:
    """One inverted list: its member ids and its centroid."""

    id: int = 0
    node_ids: list[int] = field(default_factory=list)
    centroid_vec: list[float] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        return {
            "id_": self.id,
            "node_ids_": list(self.node_ids),
            "centroid_vec_": list(self.centroid_vec),
        }


@dataclass
class IVFFlatMeta:
    """Overview of a built IVF-Flat index."""

    nlist: int = 0
    dim: int = 0
    ntotal: int = 0
    clusters: list[ClusterInfo] = field(default_factory=list)

    def add_cluster(self, cluster_id: int, node_ids: Iterable[int], centroid: Sequence[float]) -> None:
        """Record a cluster; the centroid must have ``dim`` components."""
        centroid_vec = [float(v) for v in centroid]
        if len(centroid_vec) != self.dim:
            raise ValueError(f"centroid has {len(centroid_vec)} components, expected {self.dim}")
        self.clusters.append(ClusterInfo(cluster_id, [int(i) for i in node_ids], centroid_vec))

    def to_dict(self) -> dict[str, Any]:
        return {
            "nlist_": self.nlist,
            "dim_": self.dim,
            "ntotal_": self.ntotal,
            "clusters_": [cluster._to_dict() for cluster in self.clusters],
        }