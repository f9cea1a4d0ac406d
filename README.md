# knowhere

Building blocks for vector similarity search in Python. The package has
typed parameter configs loaded from JSON-like mappings, datasets for query
inputs and results, bitset filters, named binary blobs, distance kernels in
several accumulation orders, a resizable thread pool, and records of index
structure and search visits for visualisation tools.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `knowhere.status` | `Status` codes and the `StatusError` exception |
| `knowhere.log` | logging helpers (`log_info`, `log_warning`, ...), `throw_if_not` and `KnowhereException` |
| `knowhere.binaryset` | `Binary` blobs, `copy_binary` and the `BinarySet` container |
| `knowhere.bitsetview` | `BitsetView`, a read-only view of a packed bitset |
| `knowhere.index_param` | the `IndexEnum`, `IndexMode`, `Meta`, `IndexParam` and `Metric` enums |
| `knowhere.file_manager` | the `FileManager` interface, the in-memory `LocalFileManager` and `Pack` |
| `knowhere.config` | `Config`, `BaseConfig`, `Entry`, `EntryAccess` and `ParamType` |
| `knowhere.dataset` | `DataSet` and the `gen_dataset` / `gen_result_*` helpers |
| `knowhere.distances_ref` | reference kernels accumulating element by element in single precision |
| `knowhere.distances_sse` | kernels accumulating in four lanes |
| `knowhere.distances_avx` | pairwise kernels accumulating in eight lanes |
| `knowhere.distances_avx512` | pairwise kernels accumulating in sixteen lanes |
| `knowhere.hook` | kernel selection: `SimdType`, `DistanceKernels`, `fvec_hook`, `current_kernels` |
| `knowhere.thread_pool` | `ThreadPool`, `init_global_thread_pool`, `get_global_thread_pool` |
| `knowhere.feder` | DiskANN, HNSW and IVF-Flat index and visit records with `to_dict` |

## Example

```python
from knowhere.bitsetview import BitsetView
from knowhere.config import BaseConfig, ParamType
from knowhere.distances_ref import fvec_inner_product, fvec_l2sqr

cfg = BaseConfig()
cfg.load({"metric_type": "IP", "k": 5}, ParamType.SEARCH)
print(cfg.metric_type, cfg.k)                      # IP 5

print(fvec_l2sqr([1.0, 2.0], [3.0, 4.0]))          # 8.0
print(fvec_inner_product([1.0, 2.0], [3.0, 4.0]))  # 11.0

bitset = BitsetView(bytes([0b00000101]), 8)
print(bitset.count())                # 2
print(bitset.to_string(0, 8))        # 10100000
```

Loading a config that does not fit its declared entries raises
`StatusError`. Its `status` attribute holds the `Status` code: a parameter
missing with no default (`INVALID_PARAM_IN_JSON`), a value of the wrong type
(`TYPE_CONFLICT_IN_JSON`), a value outside its range (`OUT_OF_RANGE_IN_JSON`)
or above the type's maximum (`ARITHMETIC_OVERFLOW`).

## Distance kernels

Each kernel module takes one-dimensional sequences or NumPy arrays and
computes in `float32`. The `_ny` functions take `x` and a matrix (or flat
array) of rows `ys` and return one value per row; `fvec_madd` returns
`a + bf * b` and `fvec_madd_and_argmin` returns that array together with the
index of its minimum below `1e20`, or `-1`.

`fvec_hook(supported)` picks the best enabled kernel set among the listed
`SimdType` values (detected from the machine when `supported` is `None`),
makes it current and returns the chosen type; `current_kernels()` returns the
selected `DistanceKernels`. The module-level flags `use_avx512`, `use_avx2`
and `use_sse4_2` in `knowhere.hook` turn sets off.

## Thread pool

```python
from knowhere.thread_pool import ThreadPool

with ThreadPool(4) as pool:
    future = pool.push(pow, 2, 10)
    print(future.result())   # 1024
```

`push` returns a `concurrent.futures.Future`. `resize` grows or shrinks the
pool, `stop(True)` runs the queued work before stopping and `stop(False)`
drops it.

## What this package does not do

There are no index implementations here: nothing builds, trains, searches or
serializes an index, and no common interface for indexes is provided. The
package supplies the parts such indexes are assembled from. It has no command
line tool, and `LocalFileManager` only keeps file names in memory; it does not
store anything on disk.