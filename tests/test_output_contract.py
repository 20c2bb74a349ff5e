import os
import random

import pytest

from sentence_producers.errors import ConfigurationError
from sentence_producers.output import OutputConfig, SentenceOutput, format_lines, read_lines, write_lines

S = ["the cat sat", "dogs bark", "fish swim", "birds fly", "ants dig"]


def _cfg(**kw):
    return OutputConfig(producer_type="sentence selector", **kw)


class _Sink(SentenceOutput):
    def __init__(self, path, config, rng=None):
        self.output_file = path
        self.output_config = config
        self.rng = rng if rng is not None else config.make_rng()


def test_plain_lines_keep_order_and_have_no_tabs():
    out = format_lines(S, _cfg())
    assert out == S
    assert not any("\t" in line for line in out)


def test_indexed_lines_use_original_position():
    out = format_lines(S, _cfg(create_sentence_indices=True))
    assert out == [f"{i}\t{s}" for i, s in enumerate(S)]


@pytest.mark.parametrize("k", range(0, len(S) + 1))
def test_cap_returns_k_distinct_formatted_lines(k):
    full = format_lines(S, _cfg(create_sentence_indices=True))
    out = format_lines(S, _cfg(create_sentence_indices=True, max_sentences=k))
    assert len(out) == k
    assert len(set(out)) == k
    assert set(out) <= set(full)


def test_cap_above_size_is_a_permutation():
    out = format_lines(S, _cfg(max_sentences=100))
    assert sorted(out) == sorted(S)


def test_sampling_keeps_original_indices():
    out = format_lines(S, _cfg(create_sentence_indices=True, max_sentences=3), random.Random(1))
    for line in out:
        idx, sentence = line.split("\t", 1)
        assert S[int(idx)] == sentence


def test_seeded_rng_gives_exact_subset():
    cfg = _cfg(create_sentence_indices=True, max_sentences=2)
    expected = [f"{i}\t{s}" for i, s in enumerate(S)]
    random.Random(7).shuffle(expected)
    assert format_lines(S, cfg, random.Random(7)) == expected[:2]
    assert format_lines(S, cfg, random.Random(7)) == format_lines(S, cfg, random.Random(7))


def test_random_seed_param_is_reproducible():
    cfg = _cfg(max_sentences=3, random_seed=42)
    assert format_lines(S, cfg) == format_lines(S, cfg)


def test_embedded_tab_is_not_escaped():
    out = format_lines(["a\tb"], _cfg(create_sentence_indices=True))
    assert out == ["0\ta\tb"]


def test_scenario_three_sentences_indexed_max_two(tmp_path):
    path = str(tmp_path / "out" / "sentences.tsv")
    sentences = ["the cat sat", "dogs bark", "fish swim"]
    n = _Sink(path, _cfg(create_sentence_indices=True, max_sentences=2)).output_sentences(sentences)
    lines = read_lines(path)
    assert n == 2
    assert len(lines) == 2
    assert len(set(lines)) == 2
    assert set(lines) <= {"0\tthe cat sat", "1\tdogs bark", "2\tfish swim"}


@pytest.mark.parametrize("config", [_cfg(), _cfg(create_sentence_indices=True), _cfg(max_sentences=5)])
def test_empty_candidates_write_empty_file(tmp_path, config):
    path = str(tmp_path / "empty.tsv")
    _Sink(path, config).output_sentences([])
    assert os.path.exists(path)
    assert os.path.getsize(path) == 0


def test_write_lines_overwrites_and_cleans_up(tmp_path):
    path = str(tmp_path / "s.txt")
    write_lines(["old", "content", "here"], path)
    write_lines(["new"], path)
    with open(path, encoding="utf-8") as f:
        assert f.read() == "new\n"
    assert not os.path.exists(path + ".tmp")


def test_write_lines_propagates_io_error(tmp_path):
    target = tmp_path / "a_directory"
    target.mkdir()
    with pytest.raises(OSError):
        write_lines(["x"], str(target))
    assert not os.path.exists(str(target) + ".tmp")


def test_output_config_from_params_defaults():
    cfg = OutputConfig.from_params({"sentence producer type": "sentence selector"})
    assert cfg.create_sentence_indices is False
    assert cfg.max_sentences is None
    assert cfg.random_seed is None


@pytest.mark.parametrize("params", [
    {},
    {"sentence producer type": 3},
    {"sentence producer type": "x", "max sentences": -1},
    {"sentence producer type": "x", "max sentences": True},
    {"sentence producer type": "x", "max sentences": "10"},
    {"sentence producer type": "x", "create sentence indices": "yes"},
])
def test_output_config_rejects_malformed_params(params):
    with pytest.raises(ConfigurationError):
        OutputConfig.from_params(params)


def test_output_config_is_frozen():
    cfg = _cfg()
    with pytest.raises(Exception):
        cfg.max_sentences = 3
