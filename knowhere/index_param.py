"""Names of index types, metadata keys, index parameters and metrics."""

from __future__ import annotations

from enum import Enum


class IndexEnum(str, Enum):
    INVALID = ""
    INDEX_FAISS_BIN_IDMAP = "BIN_FLAT"
    INDEX_FAISS_BIN_IVFFLAT = "BIN_IVF_FLAT"
    INDEX_FAISS_IDMAP = "FLAT"
    INDEX_FAISS_IVFFLAT = "IVF_FLAT"
    INDEX_FAISS_IVFPQ = "IVF_PQ"
    INDEX_FAISS_IVFSQ8 = "IVF_SQ8"
    INDEX_ANNOY = "ANNOY"
    INDEX_HNSW = "HNSW"
    INDEX_DISKANN = "DISKANN"


class IndexMode(Enum):
    MODE_CPU = 0
    MODE_GPU = 1


class Meta(str, Enum):
    METRIC_TYPE = "metric_type"
    DIM = "dim"
    TENSOR = "tensor"
    ROWS = "rows"
    IDS = "ids"
    DISTANCE = "distance"
    LIMS = "lims"
    TOPK = "k"
    RADIUS = "radius"
    RANGE_FILTER = "range_filter"
    INPUT_IDS = "input_ids"
    OUTPUT_TENSOR = "output_tensor"
    DEVICE_ID = "gpu_id"
    BUILD_INDEX_OMP_NUM = "build_index_omp_num"
    QUERY_OMP_NUM = "query_omp_num"
    TRACE_VISIT = "trace_visit"
    JSON_INFO = "json_info"
    JSON_ID_SET = "json_id_set"


class IndexParam(str, Enum):
    NPROBE = "nprobe"
    NLIST = "nlist"
    NBITS = "nbits"
    M = "m"
    EFCONSTRUCTION = "efConstruction"
    HNSW_M = "M"
    EF = "ef"
    OVERVIEW_LEVELS = "overview_levels"
    N_TREES = "n_trees"
    SEARCH_K = "search_k"


class Metric(str, Enum):
    IP = "IP"
    L2 = "L2"
    HAMMING = "HAMMING"
    JACCARD = "JACCARD"
    TANIMOTO = "TANIMOTO"
    SUBSTRUCTURE = "SUBSTRUCTURE"
    SUPERSTRUCTURE = "SUPERSTRUCTURE"