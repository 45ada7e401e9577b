"""Tests for folder seeding and the command-line scripts."""

import pytest

from slideshow.errors import ErrorKind, SlideshowError
from slideshow.pipeline import build, load_document
from slideshow.seed import seed_folder


class TestSeed:
    def test_seed_writes_document_and_svgs(self, tmp_path):
        written = seed_folder(tmp_path)
        names = sorted(p.name for p in written)
        assert names == ["detail.svg", "intro.svg", "slideshow.yml"]

    def test_seeded_document_is_valid(self, tmp_path):
        seed_folder(tmp_path)
        document = load_document(tmp_path / "slideshow.yml")
        assert document.sections[0].flows[1].focus == "0,0,1000,1000;250,250,500,500 0 2"
        assert document.sections[0].subsections[0].flows[0].highlight.startswith("100,100,300,200")

    def test_seeded_folder_builds(self, tmp_path):
        seed_folder(tmp_path)
        result = build(tmp_path)
        assert result == tmp_path / "slideshow.html"
        html = result.read_text(encoding="utf-8")
        assert '<div id="intro" class="flow-svg">' in html
        assert '<div id="detail" class="flow-svg">' in html

    def test_refuses_non_empty_folder(self, tmp_path):
        (tmp_path / "notes.txt").write_text("keep me")
        with pytest.raises(SlideshowError) as exc:
            seed_folder(tmp_path)
        assert exc.value.kind is ErrorKind.FOLDER_NOT_EMPTY
        assert not (tmp_path / "slideshow.yml").exists()


class TestBuildScript:
    def test_seed_then_build(self, tmp_path, capsys):
        from scripts.build_slideshow import main

        assert main(["--folder", str(tmp_path), "--seed"]) == 0
        assert main(["--folder", str(tmp_path)]) == 0
        out = capsys.readouterr().out
        assert "Slideshow generated:" in out
        assert (tmp_path / "slideshow.html").exists()

    def test_failure_exits_nonzero(self, tmp_path, capsys):
        from scripts.build_slideshow import main

        (tmp_path / "talk.yml").write_text(
            "min: 1em\nmax: 2em\nsections:\n- flows:\n  - id: missing\n    html: x\n    seconds: 1\n"
        )
        assert main(["-f", str(tmp_path)]) == 1
        err = capsys.readouterr().err
        assert "missing.svg" in err
        assert not (tmp_path / "talk.html").exists()


    def test_non_utf8_svg_reported(self, tmp_path, capsys):
        from scripts.build_slideshow import main

        seed_folder(tmp_path)
        (tmp_path / "intro.svg").write_bytes(b"<svg>\xe9\xff</svg>")
        assert main(["-f", str(tmp_path)]) == 1
        assert "intro.svg" in capsys.readouterr().err
        assert not (tmp_path / "slideshow.html").exists()


class TestValidateScript:
    def test_passes_seeded_document(self, tmp_path, capsys):
        from scripts.validate_document import main

        seed_folder(tmp_path)
        assert main([str(tmp_path / "slideshow.yml")]) == 0
        out = capsys.readouterr().out
        assert "Validation PASSED" in out
        assert "Flows: 3" in out
        assert "Flows with animations: 2" in out

    def test_reports_bad_directive(self, tmp_path, capsys):
        from scripts.validate_document import main

        path = tmp_path / "talk.yml"
        path.write_text(
            "min: 1em\nmax: 2em\nsections:\n- flows:\n"
            "  - id: a\n    html: x\n    seconds: 1\n    focus: '0,0,10 0 1'\n"
        )
        assert main([str(path)]) == 1
        err = capsys.readouterr().err
        assert "Validation FAILED" in err
        assert "a__1" in err

    def test_missing_file(self, tmp_path):
        from scripts.validate_document import main

        assert main([str(tmp_path / "absent.yml")]) == 1
