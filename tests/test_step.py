import os

import pytest

from sentence_producers.pipeline.step import Step, in_progress_path


class _FileStep(Step):
    def __init__(self, path, log, upstream=None, fail=False):
        self.path = path
        self.log = log
        self.upstream = upstream
        self.fail = fail
        self.name = os.path.basename(path)

    @property
    def inputs(self):
        return {(self.upstream.path, self.upstream)} if self.upstream else set()

    @property
    def outputs(self):
        return {self.path}

    @property
    def in_progress_file(self):
        return in_progress_path(self.path)

    def _run_step(self):
        assert os.path.exists(self.in_progress_file)
        self.log.append(self.name)
        if self.fail:
            raise RuntimeError("boom")
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("x\n")


def test_in_progress_path():
    assert in_progress_path("data/out.tsv") == "data/out_in_progress"
    assert in_progress_path("gold") == "gold_in_progress"


def test_run_removes_marker(tmp_path):
    log = []
    step = _FileStep(str(tmp_path / "a.tsv"), log)
    assert step.needs_run()
    step.run()
    assert log == ["a.tsv"]
    assert not os.path.exists(step.in_progress_file)
    assert not step.needs_run()


def test_failed_run_keeps_marker(tmp_path):
    step = _FileStep(str(tmp_path / "a.tsv"), [], fail=True)
    with pytest.raises(RuntimeError):
        step.run()
    assert os.path.exists(step.in_progress_file)
    assert step.needs_run()


def test_marker_forces_rerun(tmp_path):
    step = _FileStep(str(tmp_path / "a.tsv"), [])
    step.run()
    with open(step.in_progress_file, "w") as f:
        f.write("1\n")
    assert step.needs_run()


def test_run_pipeline_runs_upstream_first_and_skips_done(tmp_path):
    log = []
    up = _FileStep(str(tmp_path / "up.tsv"), log)
    down = _FileStep(str(tmp_path / "down.tsv"), log, upstream=up)
    down.run_pipeline()
    assert log == ["up.tsv", "down.tsv"]
    down.run_pipeline()
    assert log == ["up.tsv", "down.tsv"]
