import logging

from sentence_producers.logging_ import setup_logging


def test_setup_logging_replaces_its_handlers(tmp_path):
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        first = setup_logging(str(tmp_path / "logs"), "run_a")
        setup_logging(str(tmp_path / "logs"), "run_b")
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 2
        files = [h.baseFilename for h in added if isinstance(h, logging.FileHandler)]
        assert files == [str(tmp_path / "logs" / "run_b.log")]
        logging.getLogger("sentence_producers.test").info("hello")
        assert first.endswith("run_a.log")
    finally:
        for h in root.handlers[:]:
            if h not in before:
                root.removeHandler(h)
                h.close()
        root.setLevel(level)
