"""pytest configuration and fixtures for html-formgen tests."""

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import pytest

from html_formgen.forms.field_info_types import form_field
from html_formgen.protocols.form_config import RendererConfig


class Department(Enum):
    UB = "ub"
    FM = "fm"
    DARK_RED = "dr"


@dataclass
class EntryForm:
    department: str = form_field(
        "ub", attrs="subtype='select',accesskey='p',onchange='true',title='loading items'"
    )
    separator01: str = form_field("", attrs="subtype='separator'")
    hash_key: str = form_field(
        "2020-04-02", key="hashkey",
        attrs="maxlength='16',size='16',autocapitalize='off',suffix='salt&comma; changes randomness'",
    )
    groups: int = form_field(4, attrs="min=1,max='100',maxlength='3',size='3'")
    items: str = form_field(
        "Brutsyum, Zusoh", attrs="subtype='textarea',cols='22',rows='12',maxlength='4000'"
    )
    group01: str = form_field("", attrs="subtype='fieldset'")
    date: datetime.date = form_field(datetime.date(2020, 4, 2), attrs="min='1989-10-29'")
    time: datetime.time = form_field(datetime.time(15, 4), attrs="maxlength='12',nobreak='true'")
    group02: str = form_field("", attrs="subtype='fieldset'")
    date_layout: str = form_field(
        "", attrs="accesskey='t',maxlength='16',label='Layout of the date'"
    )
    check_this: bool = form_field(False, key="checkthis", attrs="suffix='without consequence'")
    _cache: str = ""


@dataclass
class PlainRecord:
    name: str = "Ada"
    age: int = 36
    active: bool = True
    separator01: str = ""
    _hidden: str = "secret"


@dataclass
class MultiValueRecord:
    tags: List[str] = form_field(default_factory=list, attrs="subtype='select',multiple='true'")
    aliases: List[str] = form_field(default_factory=list)
    color: Department = Department.DARK_RED
    note: Optional[str] = None


@dataclass
class BrokenRecord:
    name: str = form_field("", attrs="size='16', maxlength='3'")


@pytest.fixture
def config():
    """Deterministic renderer configuration."""
    return RendererConfig(instance_id="4711", salt="test-salt", css="")


@pytest.fixture
def entry_config(config):
    """Configuration with the department options registered."""
    config.set_options("department", ["ub", "fm"], ["UB", "FM"])
    return config


@pytest.fixture
def entry_form():
    return EntryForm()
