"""Tests for the read-only card view."""

import dataclasses
from typing import List

from markupsafe import Markup

from html_formgen.forms.card_renderer import CardRenderer
from html_formgen.forms.field_info_types import form_field
from html_formgen.protocols.form_config import SuffixPosition
from html_formgen.protocols.record_protocols import Validatable


@dataclasses.dataclass
class Applicant(Validatable):
    name: str = "Ada"
    gender: str = form_field("f", attrs="subtype='select'")
    rooms: int = form_field(4, attrs="suffix='pcs'")
    hobbies: List[str] = form_field(default_factory=lambda: ["ch", "ru"], attrs="subtype='select'")
    separator_a: str = ""
    nickname: str = ""
    status: str = ""
    msg: str = ""
    valid: bool = form_field(True, attrs="-")

    def validate(self):
        if self.valid:
            return {}, True
        return {"name": "too short", "rooms": "too many"}, False


def test_card_values_with_option_labels(config):
    """Test option keys are replaced by their labels."""
    config.set_options("gender", ["m", "f"], ["Male", "Female"])
    config.set_options("hobbies", ["ch", "ru"], ["Chess", "Running"])
    html = CardRenderer(config).render(Applicant())

    assert isinstance(html, Markup)
    assert html.startswith("<div class='struc2frm struc2frm-4711'>\n<ul>\n")
    assert "\t<li>\n\t<div class='card-label' >Name:</div>  Ada  \n\t</li>\n" in html
    assert "<div class='card-label' >Gender:</div>  Female  \n" in html
    assert "<div class='card-label' >Hobbies:</div>  Chess, Running  \n" in html
    assert html.endswith("</ul>\n</div><!-- </div class='struc2frm'... -->\n")


def test_card_keys_without_options_stay_raw(config):
    """Test values without a registered label render as they are."""
    html = CardRenderer(config).render(Applicant(gender="x"))
    assert "<div class='card-label' >Gender:</div>  x  \n" in html


def test_card_suffix_after_value(config):
    """Test the default suffix placement follows the value."""
    html = CardRenderer(config).render(Applicant())
    assert (
        "\t<li>\n\t<div class='card-label' >Rooms:</div>  4  \n"
        "\t<span class='postlabel' >pcs</span>\n\t</li>\n"
    ) in html


def test_card_suffix_below_label(config):
    """Test the suffix can render in parentheses under the label."""
    config.suffix_position = SuffixPosition.BELOW_LABEL
    html = CardRenderer(config).render(Applicant())
    assert (
        "\t<div class='card-label' >Rooms:\n"
        "\t\t<br><span class='postlabel' >(pcs)</span>\n"
        "\t</div>  4  \n"
    ) in html


def test_card_suffix_suppressed(config):
    """Test SuffixPosition.NONE hides suffixes."""
    config.suffix_position = SuffixPosition.NONE
    html = CardRenderer(config).render(Applicant())
    assert "pcs" not in html


def test_card_skip_empty_keeps_separators(config):
    """Test empty values are skipped but separators still render."""
    config.skip_empty = True
    html = CardRenderer(config).render(Applicant())

    assert "Nickname" not in html
    assert "\t<div class='separator'></div>\n" in html


def test_card_without_skip_empty(config):
    """Test empty values render by default."""
    html = CardRenderer(config).render(Applicant())
    assert "<div class='card-label' >Nickname:</div>    \n" in html


def test_card_hides_status_and_skipped_fields(config):
    """Test status carriers and '-' fields are not listed."""
    html = CardRenderer(config).render(Applicant(status="saved"))
    assert "Status" not in html
    assert "Valid" not in html


def test_card_invalid_record(config):
    """Test invalid records show the status and field errors."""
    record = Applicant(valid=False, status="not saved", msg="retry")
    html = CardRenderer(config).render(record)

    assert (
        "<ul>\n\t<li>\n"
        "\t  Record content is invalid: not saved - retry\n"
        "\t  Field: name - too short\n"
        "\t  Field: rooms - too many\n"
        "\t</li>\n</ul>\n"
    ) in html
    assert "card-label" not in html


def test_card_explicit_validator_wins(config):
    """Test a validator passed by the caller replaces the record's own."""
    html = CardRenderer(config).render(Applicant(), validator=lambda: ({"gender": "missing"}, False))
    assert "\t  Field: gender - missing\n" in html


def test_card_plain_record_is_valid(config):
    """Test records without validator render their values."""
    from conftest import PlainRecord

    html = CardRenderer(config).render(PlainRecord())
    assert "<div class='card-label' >Active:</div>  true  \n" in html
    assert "secret" not in html
    # separator key renders as divider
    assert "\t<div class='separator'></div>\n" in html


def test_card_enum_labels(config):
    """Test enum values show the labelized member name."""
    from conftest import MultiValueRecord

    html = CardRenderer(config).render(MultiValueRecord())
    assert "<div class='card-label' >Color:</div>  Dark red  \n" in html


def test_card_headline(config):
    """Test the optional headline."""
    config.show_headline = True
    html = CardRenderer(config).render(Applicant())
    assert "<h3>Applicant</h3>\n<ul>\n" in html


def test_card_diagnostics(config):
    """Test malformed attributes and non-records are reported inline."""
    from conftest import BrokenRecord

    assert "card() - field name" in CardRenderer(config).render(BrokenRecord())
    assert CardRenderer(config).render("text") == "card() - argument must be a dataclass instance - is str"
