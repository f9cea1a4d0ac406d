import threading

from knowhere.dataset import (
    DataSet,
    gen_dataset,
    gen_result_json,
    gen_result_range,
    gen_result_tensor,
    gen_result_topk,
)


def test_empty_dataset_defaults():
    ds = DataSet()
    assert ds.rows == 0
    assert ds.dim == 0
    assert ds.ids is None
    assert ds.distance is None
    assert ds.lims is None
    assert ds.tensor is None
    assert ds.json_info == ""
    assert ds.json_id_set == ""
    assert ds.is_owner is True


def test_gen_dataset_does_not_own():
    vectors = [[1.0, 2.0], [3.0, 4.0]]
    ds = gen_dataset(2, 2, vectors)
    assert ds.rows == 2
    assert ds.dim == 2
    assert ds.tensor is vectors
    assert ds.is_owner is False


def test_gen_result_tensor():
    data = b"\x01\x02"
    ds = gen_result_tensor(data)
    assert ds.tensor is data
    assert ds.is_owner is True


def test_gen_result_topk():
    ids = [3, 1, 4, 1]
    dist = [0.1, 0.2, 0.3, 0.4]
    ds = gen_result_topk(2, 2, ids, dist)
    assert ds.rows == 2
    assert ds.dim == 2
    assert ds.ids == ids
    assert ds.distance == dist
    assert ds.lims is None


def test_gen_result_range():
    ids = [5, 6, 7]
    dist = [0.5, 0.6, 0.7]
    lims = [0, 1, 3]
    ds = gen_result_range(2, ids, dist, lims)
    assert ds.rows == 2
    assert ds.lims == lims
    assert ds.ids == ids
    assert ds.dim == 0


def test_gen_result_json():
    ds = gen_result_json('{"a": 1}', "[1, 2]")
    assert ds.json_info == '{"a": 1}'
    assert ds.json_id_set == "[1, 2]"
    assert ds.is_owner is True


def test_set_and_get_arbitrary_value():
    ds = DataSet()
    ds.set("custom", {"x": 1})
    assert ds.get("custom") == {"x": 1}
    assert "custom" in ds


def test_get_missing_returns_default():
    ds = DataSet()
    assert ds.get("missing") is None
    assert ds.get("missing", 42) == 42


def test_typed_fields_share_keys_with_set():
    ds = DataSet()
    ds.rows = 9
    assert ds.get("rows") == 9
    ds.set("dim", 4)
    assert ds.dim == 4


def test_concurrent_writes_are_all_kept():
    ds = DataSet()

    def writer(n):
        for i in range(100):
            ds.set(f"{n}-{i}", i)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert all(ds.get(f"{n}-99") == 99 for n in range(4))