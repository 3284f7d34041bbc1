"""Tests for HTML form rendering."""

import dataclasses
import re
from typing import List

from markupsafe import Markup

from html_formgen.forms.field_info_types import form_field
from html_formgen.forms.form_renderer import FormRenderer

TOKEN_PATTERN = re.compile(r"\t<input name='token' type='hidden' value='([0-9a-f]{64})' />\n")


def test_form_structure(entry_form, entry_config):
    """Test container, form tag, token and closing comment."""
    html = FormRenderer(entry_config).render(entry_form)

    assert isinstance(html, Markup)
    assert html.startswith("<div class='struc2frm struc2frm-4711'>\n<form name='frmMain' method='POST' >\n")
    assert TOKEN_PATTERN.search(html)
    assert html.endswith("</form>\n</div><!-- </div class='struc2frm'... -->\n")


def test_token_is_valid_for_config(entry_form, entry_config):
    """Test the embedded token validates against the same configuration."""
    html = FormRenderer(entry_config).render(entry_form)
    token = TOKEN_PATTERN.search(html).group(1)
    assert entry_config.token_service().is_valid(token)


def test_select_marks_current_option(entry_form, entry_config):
    """Test exactly the current option is selected."""
    html = FormRenderer(entry_config).render(entry_form)

    assert "\t\t<option value='ub' selected >UB</option>\n" in html
    assert "\t\t<option value='fm'>FM</option>\n" in html
    assert html.count(" selected ") == 1
    assert (
        "\t<div class='select-arrow'>\n"
        "\t<select name='department' id='department' accesskey='p' "
        "onchange='javascript:this.form.submit();' title='loading items'>\n"
    ) in html


def test_select_without_options_is_empty(entry_form, config):
    """Test a select without registered options renders no option tags."""
    html = FormRenderer(config).render(entry_form)
    assert "<option" not in html
    assert "\t</select>\n" in html


def test_labels_and_access_keys(entry_form, entry_config):
    """Test labels carry access key markup and textarea alignment."""
    html = FormRenderer(entry_config).render(entry_form)

    assert "\t<label for='department' style='' >De<u>p</u>artment</label>\n" in html
    assert "\t<label for='date_layout' style='' >Layou<u>t</u> of the date</label>\n" in html
    assert "\t<label for='items' style='vertical-align: top;' >Items</label>\n" in html
    assert "<label for='separator01'" not in html
    assert "<label for='group01'" not in html


def test_plain_inputs(entry_form, entry_config):
    """Test typed inputs carry value and pass-through attributes."""
    html = FormRenderer(entry_config).render(entry_form)

    assert (
        "\t<input type='number' name='groups' id='groups' value='4' "
        "min=1 max='100' maxlength='3' size='3' />\n"
        "\t<div style='height:0.6rem'>&nbsp;</div>\n"
    ) in html
    assert "\t<input type='date' name='date' id='date' value='2020-04-02' min='1989-10-29' />" in html
    assert "\t<textarea name='items' id='items' cols='22' rows='12' maxlength='4000'>Brutsyum, Zusoh</textarea>" in html


def test_nobreak_suppresses_spacer(entry_form, entry_config):
    """Test fields with nobreak are followed by a plain newline."""
    html = FormRenderer(entry_config).render(entry_form)
    assert "\t<input type='time' name='time' id='time' value='15:04' maxlength='12' />\n</fieldset>\n" in html


def test_suffix_with_escaped_comma(entry_form, entry_config):
    """Test the comma escape is resolved in the final markup."""
    html = FormRenderer(entry_config).render(entry_form)

    assert "<span class='postlabel' >salt, changes randomness</span>" in html
    assert "&comma;" not in html


def test_checkbox_with_hidden_fallback(entry_form, entry_config):
    """Test an unchecked checkbox still submits 'false'."""
    html = FormRenderer(entry_config).render(entry_form)

    assert (
        "\t<input type='checkbox' name='checkthis' id='checkthis' value='true' />\n"
        "\t<input type='hidden' name='checkthis' value='false' />"
        "<span class='postlabel' >without consequence</span>"
    ) in html

    checked = FormRenderer(entry_config).render(dataclasses.replace(entry_form, check_this=True))
    assert "value='true' checked />" in checked


def test_fieldsets_open_and_close(entry_form, entry_config):
    """Test a fieldset closes before the next opens and at the end."""
    html = FormRenderer(entry_config).render(entry_form)

    assert html.count("<fieldset>") == 2
    assert html.count("</fieldset>") == 2
    assert "</fieldset>\n<fieldset>\t<legend>&nbsp;Group 02&nbsp;</legend>\n" in html
    assert html.index("</fieldset>\n\t<button") > html.index("name='checkthis'")


def test_separator(entry_form, entry_config):
    """Test separators render a divider without spacer."""
    html = FormRenderer(entry_config).render(entry_form)
    assert "\t<div class='separator'></div>\n\t<label for='hashkey'" in html


def test_internal_skipped_and_status_fields_are_not_rendered(config):
    """Test internal, '-' and status fields never render."""
    @dataclasses.dataclass
    class Rec:
        name: str = "x"
        ignored: str = form_field("", attrs="-")
        status: str = "saved"
        _cache: str = "secret"

    html = FormRenderer(config).render(Rec())
    assert "name='name'" in html
    assert "ignored" not in html
    assert "name='status'" not in html
    assert "secret" not in html


def test_submit_button_required(entry_form, entry_config):
    """Test interactive fields require the submit button."""
    html = FormRenderer(entry_config).render(entry_form)
    assert (
        "\t<button type='submit' name='btnSubmit' value='1' accesskey='s' ><b>S</b>ubmit</button>\n"
        "\t<div style='height:0.6rem'>&nbsp;</div>\n"
    ) in html


def test_auto_submit_select_only_uses_hidden_marker(config):
    """Test a lone auto-submitting select needs no button unless forced."""
    @dataclasses.dataclass
    class Chooser:
        department: str = form_field("ub", attrs="subtype='select',onchange='true'")

    config.set_options("department", ["ub", "fm"], ["UB", "FM"])
    html = FormRenderer(config).render(Chooser())
    assert "\t<input type='hidden' name='btnSubmit' value='1' />\n" in html
    assert "<button" not in html

    config.force_submit = True
    assert "<button" in FormRenderer(config).render(Chooser())


def test_errors(entry_form, entry_config):
    """Test global and field errors render as error blocks."""
    entry_config.add_error("global", "Please check the form")
    entry_config.add_error("hashkey", "too short")
    entry_config.add_error("hashkey", "no digits")
    html = FormRenderer(entry_config).render(entry_form)

    assert "<form name='frmMain' method='POST' >\n\t<p class='error-block' >Please check the form</p>\n" in html
    assert (
        "\t<p class='error-block' >too short<br>\nno digits</p>\n"
        "\t<label for='hashkey' style='' >Hashkey</label>\n"
    ) in html


def test_focus_first_error(entry_form, entry_config):
    """Test only the first errored field gets autofocus."""
    entry_config.focus_first_error = True
    entry_config.add_error("groups", "too many")
    entry_config.add_error("date_layout", "bad layout")
    html = FormRenderer(entry_config).render(entry_form)

    assert html.count(" autofocus") == 1
    assert "size='3' autofocus />" in html


def test_headline_and_instance_style(entry_form, entry_config):
    """Test the optional headline and the indent-specific stylesheet."""
    entry_config.show_headline = True
    entry_config.indent = 200
    html = FormRenderer(entry_config).render(entry_form)

    assert "<h3>Entry form</h3>\n" in html
    assert "div.struc2frm-4711  label {" in html
    assert "min-width: 200px;" in html
    assert "margin-left: 216px;" in html


def test_default_css_is_included(entry_form):
    """Test the generic stylesheet precedes the container."""
    from html_formgen.protocols.form_config import RendererConfig

    html = FormRenderer(RendererConfig(salt="s")).render(entry_form)
    assert html.startswith("<style>")


def test_without_form_tag(entry_form, entry_config):
    """Test form_tag=False omits the form element."""
    entry_config.form_tag = False
    html = FormRenderer(entry_config).render(entry_form)
    assert "<form" not in html
    assert "</form>" not in html


def test_file_upload_form_is_multipart(config):
    """Test a byte field switches the form to multipart post."""
    @dataclasses.dataclass
    class Upload:
        text_field: str = ""
        upload: bytes = form_field(b"", attrs="accesskey='u',accept='.json'")

    html = FormRenderer(config).render(Upload())
    assert "<form name='frmMain' method='post' enctype='multipart/form-data' >\n" in html
    assert "\t<label for='upload' style='' ><u>U</u>pload</label>\n" in html
    assert "\t<input type='file' name='upload' id='upload' value='ignored.json' accesskey='u' accept='.json' />" in html


def test_multi_value_select_marks_all_keys(config):
    """Test every contained key is selected for multi-value selects."""
    from conftest import MultiValueRecord

    config.set_options("tags", ["a", "b", "c"], ["A", "B", "C"])
    html = FormRenderer(config).render(MultiValueRecord(tags=["a", "c"]))

    assert "<option value='a' selected >A</option>" in html
    assert "<option value='b'>B</option>" in html
    assert "<option value='c' selected >C</option>" in html


def test_wildcard_select(config):
    """Test '*' selects every option when wildcardselect is set."""
    @dataclasses.dataclass
    class Filter:
        tags: List[str] = form_field(
            default_factory=lambda: ["*"], attrs="subtype='select',multiple='true',wildcardselect='true'"
        )

    config.set_options("tags", ["*", "a", "b"], ["All", "A", "B"])
    html = FormRenderer(config).render(Filter())
    assert html.count(" selected ") == 3
    assert "wildcardselect" not in html


def test_enum_select_uses_members(config):
    """Test enum fields derive their options from the members."""
    from conftest import MultiValueRecord

    html = FormRenderer(config).render(MultiValueRecord())
    assert "<select name='color' id='color'>" in html
    assert "<option value='dr' selected >Dark red</option>" in html
    assert "<option value='ub'>Ub</option>" in html


def test_multi_value_inputs_repeat_without_id(config):
    """Test non-select multi-value fields render one input per element."""
    from conftest import MultiValueRecord

    html = FormRenderer(config).render(MultiValueRecord(aliases=["x", "y"]))
    assert "\t<input type='text' name='aliases' id='aliases' value='x' />\n\t<input type='text' name='aliases' value='y' />" in html

    empty = FormRenderer(config).render(MultiValueRecord())
    assert "\t<input type='text' name='aliases' id='aliases' value='' />" in empty


def test_invalid_attribute_string_returns_diagnostic(config):
    """Test malformed attribute strings abort the render."""
    from conftest import BrokenRecord

    html = FormRenderer(config).render(BrokenRecord())
    assert isinstance(html, Markup)
    assert "field name" in html
    assert "struc2frm" not in html
    assert "<form" not in html


def test_non_record_returns_diagnostic(config):
    """Test non-dataclass arguments are reported inline."""
    from conftest import EntryForm

    assert FormRenderer(config).render({"a": 1}) == "form() - argument must be a dataclass instance - is dict"
    assert "argument must be a dataclass instance" in FormRenderer(config).render(EntryForm)


def test_renderer_is_reusable_after_error(entry_form, entry_config):
    """Test a diagnostic leaves the renderer usable."""
    from conftest import BrokenRecord

    renderer = FormRenderer(entry_config)
    renderer.render(BrokenRecord())
    assert "<form" in renderer.render(entry_form)


def test_rendering_is_deterministic(entry_form, entry_config):
    """Test repeated renders are identical apart from the token."""
    renderer = FormRenderer(entry_config)
    first = TOKEN_PATTERN.sub("", renderer.render(entry_form))
    second = TOKEN_PATTERN.sub("", renderer.render(entry_form))
    assert first == second
