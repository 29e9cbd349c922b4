# topmark:header:start
#
#   project      : OutputWriter
#   file         : markup.py
#   file_relpath : src/outputwriter/encoders/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XML (structured markup) encoding built on `xml.etree.ElementTree`.

The engine reaches this module through two operations only:

- `build_tree(value)` turns a normalized value into an `ElementTree` document.
- `render(doc)` serializes the document, prefixed with an XML declaration.

Tree layout:

    {"name": "a", "tags": ["x", "y"], "n": None, "ok": True}

becomes

    <root>
      <name>a</name>
      <tags><item>x</item><item>y</item></tags>
      <n />
      <ok>true</ok>
    </root>

Mapping keys that are not valid XML element names are written as
``<item key="...">`` elements so that no key is lost.

Characters XML 1.0 cannot carry (C0 controls other than tab, LF and CR,
surrogates, U+FFFE and U+FFFF) are never written: a text or key containing
one is rejected with
[`UnsupportedShapeError`][outputwriter.core.errors.UnsupportedShapeError],
so every rendered document is well-formed.
"""

from __future__ import annotations

import copy
import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final

from outputwriter.config.keys import SettingKey
from outputwriter.config.logging import get_logger
from outputwriter.constants import XML_DEFAULT_ENCODING, XML_DEFAULT_VERSION
from outputwriter.core.errors import InvalidInputError, UnsupportedShapeError
from outputwriter.core.options import WriteOption, has_option

if TYPE_CHECKING:
    from outputwriter.config.logging import OutputWriterLogger
    from outputwriter.core.store import AttributeStore

logger: OutputWriterLogger = get_logger(__name__)

# XML 1.0 Name production, restricted to the ASCII-friendly subset we emit.
# Names starting with "xml" (any case) are reserved.
_XML_NAME_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z_][A-Za-z0-9_.\-]*$")

# Complement of the XML 1.0 Char production.
_XML_ILLEGAL_RE: Final[re.Pattern[str]] = re.compile(
    "[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def is_valid_tag(name: str) -> bool:
    """Return True if `name` can be used verbatim as an element name."""
    return bool(_XML_NAME_RE.match(name)) and not name.lower().startswith("xml")


def _checked(text: str, *, what: str) -> str:
    found: re.Match[str] | None = _XML_ILLEGAL_RE.search(text)
    if found is not None:
        raise UnsupportedShapeError(
            f"{what} {text!r} contains U+{ord(found.group()):04X}, which XML cannot represent"
        )
    return text


def _text(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return _checked(str(value), what="Text")


def _fill(element: ET.Element, value: Any, item_tag: str) -> None:
    if isinstance(value, Mapping):
        for key, child_value in value.items():
            key_str: str = str(key)
            if is_valid_tag(key_str):
                child: ET.Element = ET.SubElement(element, key_str)
            else:
                child = ET.SubElement(element, item_tag, {"key": _checked(key_str, what="Key")})
            _fill(child, child_value, item_tag)
    elif isinstance(value, list):
        for item in value:
            _fill(ET.SubElement(element, item_tag), item, item_tag)
    else:
        element.text = _text(value)


def build_tree(
    value: Any,
    *,
    root_tag: str = "root",
    item_tag: str = "item",
) -> ET.ElementTree:
    """Build a markup document from a normalized value.

    Args:
        value (Any): A normalized value (scalar, list, or str-keyed dict).
        root_tag (str): Name of the document element.
        item_tag (str): Name used for sequence items and for keys that are not
            valid element names.

    Returns:
        ET.ElementTree: The document.

    Raises:
        InvalidInputError: If `root_tag` or `item_tag` is not a valid element name.
    """
    for tag in (root_tag, item_tag):
        if not is_valid_tag(tag):
            raise InvalidInputError(f"'{tag}' is not a valid XML element name")
    root = ET.Element(root_tag)
    _fill(root, value, item_tag)
    return ET.ElementTree(root)


def render(
    doc: ET.ElementTree,
    *,
    version: str = XML_DEFAULT_VERSION,
    encoding: str = XML_DEFAULT_ENCODING,
    declaration: bool = True,
    pretty: bool = False,
    indent: int = 2,
) -> str:
    """Serialize a markup document to text.

    Args:
        doc (ET.ElementTree): The document to render.
        version (str): XML version written in the declaration.
        encoding (str): Encoding name written in the declaration. The returned
            value is always a ``str``; encode it with this codec when writing bytes.
        declaration (bool): Whether to prefix the ``<?xml ...?>`` declaration.
        pretty (bool): Indent nested elements.
        indent (int): Spaces per nesting level when `pretty` is set.

    Returns:
        str: The document text, ending with a newline.
    """
    root: ET.Element | None = doc.getroot()
    if root is None:
        raise InvalidInputError("Cannot render an empty document")
    if pretty:
        # ET.indent mutates in place; work on a copy so `doc` stays compact.
        root = copy.deepcopy(root)
        ET.indent(root, space=" " * indent)
    body: str = ET.tostring(root, encoding="unicode")
    if not declaration:
        return body + "\n"
    return f'<?xml version="{version}" encoding="{encoding}"?>\n{body}\n'


def encode(value: Any, *, options: int, settings: AttributeStore) -> str:
    """Encode a normalized value as an XML document.

    Honours `WriteOption.PRETTY_PRINT` and `WriteOption.OMIT_DECLARATION`.
    """
    indent: int | None = settings.get(SettingKey.INDENT)
    doc: ET.ElementTree = build_tree(
        value,
        root_tag=settings.get(SettingKey.ROOT_TAG) or "root",
        item_tag=settings.get(SettingKey.ITEM_TAG) or "item",
    )
    logger.trace("Built markup tree rooted at <%s>", doc.getroot().tag)  # type: ignore[union-attr]
    return render(
        doc,
        version=settings.get(SettingKey.XML_VERSION) or XML_DEFAULT_VERSION,
        encoding=settings.get(SettingKey.XML_ENCODING) or XML_DEFAULT_ENCODING,
        declaration=not has_option(options, WriteOption.OMIT_DECLARATION),
        pretty=has_option(options, WriteOption.PRETTY_PRINT),
        indent=2 if indent is None else indent,
    )
