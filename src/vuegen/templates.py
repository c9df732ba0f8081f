"""Static file templates for a generated Vue component.

Every function here is pure: it returns text and never touches the
filesystem. The component name is substituted verbatim, so callers must pass a
validated camelCase identifier.
"""

from __future__ import annotations

from string import Template

from .schema import GeneratedFile, Language

__all__ = [
    "component_files",
    "logic_filename",
    "markup_filename",
    "render_logic",
    "render_markup",
    "render_style",
    "style_filename",
]


_PREAMBLE = """import { defineComponent } from "vue";

const fs = require("fs");
const path = require("path");

const htmlPath = path.join(__dirname, "${name}.component.html");
const htmlString = fs.readFileSync(htmlPath, { encoding: "utf8" });
const stylePath = path.join(__dirname, "${name}.component.style.html");
const styleString = fs.readFileSync(stylePath, { encoding: "utf8" });
const templateString = htmlString + styleString;
"""

TS_TEMPLATE = Template(
    _PREAMBLE
    + """
export const ${name} = defineComponent({
    props: {
        title: { type: String, default: "" },
    },
    template: templateString
});"""
)

JS_TEMPLATE = Template(
    _PREAMBLE
    + """
export const ${name} = defineComponent({
    props: {
        title: {
            type: String,
            default: ""
        }
    },
    template: templateString
});"""
)

MARKUP_TEMPLATE = "<div>{{title}}</div>"
STYLE_TEMPLATE = "<style></style>"

_LOGIC_TEMPLATES = {
    Language.TS: TS_TEMPLATE,
    Language.JS: JS_TEMPLATE,
}


def logic_filename(name: str, language: Language) -> str:
    return f"{name}.component.{Language(language).value}"


def markup_filename(name: str) -> str:
    return f"{name}.component.html"


def style_filename(name: str) -> str:
    return f"{name}.component.style.html"


def render_logic(name: str, language: Language = Language.TS) -> str:
    """Return the logic file defining the component for ``language``."""

    template = _LOGIC_TEMPLATES[Language(language)]
    return template.substitute(name=name)


def render_markup() -> str:
    return MARKUP_TEMPLATE


def render_style() -> str:
    return STYLE_TEMPLATE


def component_files(name: str, language: Language = Language.TS) -> list[GeneratedFile]:
    """Return the logic, markup and style files for ``name`` in write order."""

    return [
        GeneratedFile(filename=logic_filename(name, language), content=render_logic(name, language)),
        GeneratedFile(filename=markup_filename(name), content=render_markup()),
        GeneratedFile(filename=style_filename(name), content=render_style()),
    ]
