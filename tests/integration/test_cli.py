from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from looksalike.cli import EXIT_DIFFERENT, EXIT_ERROR, EXIT_SAME, build_parser, main

BLACK = (0, 0, 0)
BLOCK = {(x, y): BLACK for x in (1, 2) for y in (1, 2)}


@pytest.fixture()
def logging_setup() -> Iterator[MagicMock]:
    with patch("looksalike.cli.setup_logging") as setup:
        yield setup


@pytest.mark.integration
class TestCli:
    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args(["a.png", "b.png"])
        assert args.ignore_antialiasing is True
        assert args.tolerance is None
        assert args.pixel_ratio == 1.0
        assert args.diff is None

    def test_same_images(
        self,
        write_image: Callable[..., Path],
        logging_setup: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main([str(write_image("a.png", 4, 4)), str(write_image("b.png", 4, 4))])
        assert code == EXIT_SAME
        assert capsys.readouterr().out.strip().endswith("same")
        logging_setup.assert_called_once()

    def test_different_images_with_diff_and_area(
        self,
        write_image: Callable[..., Path],
        tmp_path: Path,
        logging_setup: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        diff = tmp_path / "diff.png"
        code = main(
            [
                str(write_image("a.png", 5, 5)),
                str(write_image("b.png", 5, 5, pixels=BLOCK)),
                "--diff",
                str(diff),
                "--area",
            ]
        )
        out = capsys.readouterr().out
        assert code == EXIT_DIFFERENT
        assert diff.exists()
        assert "left=1 top=1 width=2 height=2" in out
        assert out.strip().endswith("different")

    def test_strict_and_tolerance_conflict(
        self, write_image: Callable[..., Path], logging_setup: MagicMock
    ) -> None:
        code = main(
            [
                str(write_image("a.png", 2, 2)),
                str(write_image("b.png", 2, 2)),
                "--strict",
                "--tolerance",
                "3",
            ]
        )
        assert code == EXIT_ERROR

    def test_missing_file(
        self, write_image: Callable[..., Path], tmp_path: Path, logging_setup: MagicMock
    ) -> None:
        code = main([str(write_image("a.png", 2, 2)), str(tmp_path / "missing.png")])
        assert code == EXIT_ERROR

    def test_log_options_forwarded(
        self, write_image: Callable[..., Path], logging_setup: MagicMock
    ) -> None:
        main(
            [
                str(write_image("a.png", 2, 2)),
                str(write_image("b.png", 2, 2)),
                "--log-level",
                "DEBUG",
                "--json-logs",
            ]
        )
        logging_setup.assert_called_once_with(log_level="DEBUG", json_output=True)
