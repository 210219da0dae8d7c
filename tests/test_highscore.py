# tests/test_highscore.py
import json
from classic_snake.core.highscore import JSONScoreStore, MemoryScoreStore

def test_missing_file_loads_zero(tmp_path):
    assert JSONScoreStore(str(tmp_path / "nope.json")).load() == 0

def test_save_then_load(tmp_path):
    path = tmp_path / "sub" / "hs.json"
    store = JSONScoreStore(str(path))
    store.save(12)
    assert json.loads(path.read_text()) == {"highscore": 12}
    assert JSONScoreStore(str(path)).load() == 12

def test_corrupt_file_loads_zero(tmp_path):
    path = tmp_path / "hs.json"
    path.write_text("{not json")
    assert JSONScoreStore(str(path)).load() == 0

def test_wrong_shapes_load_zero(tmp_path):
    path = tmp_path / "hs.json"
    for payload in ("[1, 2]", '{"highscore": "abc"}', '{"highscore": -4}',
                    '{"highscore": true}', '{"highscore": Infinity}', '{"other": 9}'):
        path.write_text(payload)
        assert JSONScoreStore(str(path)).load() == 0, payload

def test_numeric_string_is_accepted(tmp_path):
    path = tmp_path / "hs.json"
    path.write_text('{"highscore": "7"}')
    assert JSONScoreStore(str(path)).load() == 7

def test_clear_removes_file(tmp_path):
    store = JSONScoreStore(str(tmp_path / "hs.json"))
    store.save(3)
    store.clear()
    store.clear()
    assert store.load() == 0

def test_memory_store_counts_writes():
    m = MemoryScoreStore("garbage")
    assert m.load() == 0
    m.save(4)
    assert m.load() == 4
    assert m.writes == 1
