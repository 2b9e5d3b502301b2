from __future__ import annotations

from tools import printer
from tools.cli import solve as cli

from _grids import CLASSIC, CLASSIC_SOLUTION, cells


def test_export_pdf_writes_a_pdf(tmp_path) -> None:
    out = printer.export_pdf(cells(CLASSIC), cells(CLASSIC_SOLUTION), tmp_path / "classic.pdf")
    assert out.exists()
    assert out.read_bytes().startswith(b"%PDF")


def test_export_pdf_without_solution(tmp_path) -> None:
    out = printer.export_pdf(cells(CLASSIC), None, tmp_path / "unsolved.pdf")
    assert out.stat().st_size > 0


def test_cli_solve_renders_pdf(tmp_path, capsys) -> None:
    target = tmp_path / "out.pdf"
    assert cli.main(["solve", CLASSIC, "--pdf", str(target)]) == cli.EXIT_OK
    capsys.readouterr()
    assert target.read_bytes().startswith(b"%PDF")
