"""Tests for the slideshow document and directive models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from slideshow.schemas.document import Document, Flow, Section, validate_document
from slideshow.schemas.directives import CompiledDirectives, Quadruple, TimeRange


def _document_data(**overrides):
    data = {
        "min": "1em",
        "max": "2.5em",
        "sections": [
            {"flows": [{"id": "intro", "html": "Hello", "seconds": 2}]},
        ],
    }
    data.update(overrides)
    return data


class TestDocumentSchema:
    def test_minimal_document(self):
        doc = Document.model_validate(_document_data())
        assert doc.min_size == "1em"
        assert doc.max_size == "2.5em"
        assert doc.flip_panes is None
        assert len(doc.sections) == 1
        assert doc.sections[0].subsections is None

    def test_flow_defaults(self):
        flow = Flow(id="intro", html="Hi", seconds=1)
        assert flow.centered is None
        assert flow.focus is None
        assert flow.highlight is None

    def test_style_settings_use_camel_case_keys(self):
        doc = Document.model_validate(_document_data(
            svgPaneBackgroundColor="#ffffff",
            textPaneBackgroundColor="#f4f4f4",
            topBorder="solid 2px",
            flipPanes=True,
            landscapeOnly=False,
        ))
        assert doc.svg_pane_background_color == "#ffffff"
        assert doc.top_border == "solid 2px"
        assert doc.flip_panes is True
        assert doc.landscape_only is False

    def test_legacy_illustration_key(self):
        data = _document_data()
        data["illustration"] = data.pop("sections")
        doc = Document.model_validate(data)
        assert doc.sections[0].flows[0].id == "intro"

    def test_payload_round_trip(self):
        doc = Document.model_validate(_document_data(flipPanes=True))
        payload = doc.to_payload()
        assert payload["min"] == "1em"
        assert payload["flipPanes"] is True
        assert "sections" in payload
        assert "illustration" not in payload
        # Unset optionals are left out
        assert "svgPaneBackgroundColor" not in payload
        assert "centered" not in payload["sections"][0]["flows"][0]
        assert Document.model_validate(payload) == doc

    def test_flows_required(self):
        with pytest.raises(ValidationError, match="flows"):
            Section.model_validate({"subsections": []})
        errors = validate_document(_document_data(sections=[{"subsections": [{}]}]))
        locs = sorted(e.split(":")[0] for e in errors)
        assert locs == ["sections.0.flows", "sections.0.subsections.0.flows"]

    def test_subsections(self):
        section = Section.model_validate({
            "flows": [],
            "subsections": [{"flows": [{"id": "a", "html": "A", "seconds": 1}]}],
        })
        assert section.subsections[0].flows[0].id == "a"


class TestValidateDocument:
    def test_valid_document(self):
        assert validate_document(_document_data()) == []

    def test_vmax_and_px_sizes(self):
        assert validate_document(_document_data(min="12px", max="3.5vmax")) == []

    def test_bad_font_size(self):
        errors = validate_document(_document_data(min="12pt"))
        assert len(errors) == 1
        assert errors[0].startswith("min:")

    def test_missing_required(self):
        data = _document_data()
        del data["max"]
        errors = validate_document(data)
        assert any(e.startswith("max:") for e in errors)

    def test_bad_flow_id(self):
        data = _document_data()
        data["sections"][0]["flows"][0]["id"] = "not allowed!"
        errors = validate_document(data)
        assert len(errors) == 1
        assert errors[0].startswith("sections.0.flows.0.id:")

    def test_bad_color_and_border(self):
        errors = validate_document(_document_data(
            svgPaneBackgroundColor="white", leftBorder="2px solid",
        ))
        locs = sorted(e.split(":")[0] for e in errors)
        assert locs == ["leftBorder", "svgPaneBackgroundColor"]

    def test_nesting_deeper_than_subsections(self):
        data = _document_data()
        data["sections"][0]["subsections"] = [{"flows": [], "subsections": [{"flows": []}]}]
        errors = validate_document(data)
        assert len(errors) == 1
        assert errors[0].startswith("sections.0.subsections.0.subsections:")

    def test_not_a_mapping(self):
        errors = validate_document(None)
        assert len(errors) == 1
        assert errors[0].startswith("<document>:")


class TestDirectiveModels:
    def test_quadruple_view_box(self):
        q = Quadruple(x=Decimal("0"), y=Decimal("0.50"), w=Decimal("1000"), h=Decimal(".5"),
                      source="0,0.50,1000,.5")
        assert q.as_view_box() == "0 0.50 1000 .5"
        assert q.components() == ["0", "0.50", "1000", ".5"]

    def test_quadruple_rejects_negative(self):
        with pytest.raises(ValidationError):
            Quadruple(x=Decimal("-1"), y=Decimal("0"), w=Decimal("1"), h=Decimal("1"), source="-1,0,1,1")

    def test_time_range_duration(self):
        timing = TimeRange(start=Decimal("1"), end=Decimal("3.5"))
        assert timing.duration == Decimal("2.5")

    def test_time_range_duration_is_exact(self):
        timing = TimeRange(start=Decimal("0.25"), end=Decimal("100000000000000000000000000000.5"))
        assert timing.duration == Decimal("100000000000000000000000000000.25")

    def test_compiled_directives_dump(self):
        compiled = CompiledDirectives(focus="<animate/>")
        assert compiled.model_dump(exclude_none=True) == {"focus": "<animate/>"}
