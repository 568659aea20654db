"""Loader for the equipment status XML feed.

The document carries its "as of" time split in a header date and hour, and a
hierarchy of lines, stations and equipments::

    <root>
      <info><date>2024-03-10</date><hour>07:15:30</hour></info>
      <data><lines><line id="A"><stations><station id="PER" name="Perrache">
        <equipments><equipment id="E1">...</equipment></equipments>
      </station></stations></line></lines></data>
    </root>

An equipment may be listed under several lines or stations; only the last
occurrence in document order is kept.
"""

import codecs
import logging
import re
import xml.etree.ElementTree as ET
from datetime import datetime, tzinfo

from sytralrt.adapters.loaders.time_parsing import combine_date_and_hour, parse_optional_date
from sytralrt.domain.errors import DecodeError
from sytralrt.domain.models.equipment import EquipmentDetail

logger = logging.getLogger(__name__)

_XML_DECLARATION = re.compile(rb"^\s*<\?xml\s[^>]*?\?>")
_DECLARED_ENCODING = re.compile(rb"""encoding\s*=\s*["']([A-Za-z0-9._:-]+)["']""")

# Declared charset (lower case) -> Python codec
_SUPPORTED_CHARSETS = {
    "utf-8": "utf-8-sig",
    "iso-8859-1": "latin-1",
}

# Leading bytes of documents encoded with a multi-byte unit, longest first
_WIDE_SIGNATURES = (
    (codecs.BOM_UTF32_LE, "UTF-32"),
    (codecs.BOM_UTF32_BE, "UTF-32"),
    (codecs.BOM_UTF16_LE, "UTF-16"),
    (codecs.BOM_UTF16_BE, "UTF-16"),
    (b"<\x00", "UTF-16"),
    (b"\x00<", "UTF-16"),
)


def declared_charset(data: bytes) -> str | None:
    """Return the document encoding.

    A UTF-16 or UTF-32 signature wins over the declaration, which cannot be
    read as ASCII in those encodings.
    """
    for signature, charset in _WIDE_SIGNATURES:
        if data.startswith(signature):
            return charset
    declaration = _XML_DECLARATION.match(data)
    if not declaration:
        return None
    encoding = _DECLARED_ENCODING.search(declaration.group(0))
    return encoding.group(1).decode("ascii") if encoding else None


def decode_document(data: bytes) -> str:
    """Transcode the document to text according to its declared charset.

    The XML declaration is dropped from the returned text since its encoding
    no longer applies.

    Raises:
        DecodeError: If the charset is unknown or the bytes do not match it.
    """
    charset = declared_charset(data) or "utf-8"
    codec = _SUPPORTED_CHARSETS.get(charset.lower())
    if codec is None:
        raise DecodeError(f"unknown charset {charset!r}")

    try:
        text = data.decode(codec)
    except UnicodeDecodeError as e:
        raise DecodeError(f"content is not valid {charset}: {e}") from e

    return re.sub(r"^\s*<\?xml\s[^>]*?\?>", "", text, count=1)


def _text(element: ET.Element, path: str) -> str:
    return (element.findtext(path) or "").strip()


def _equipment_detail(
    equipment: ET.Element,
    line: ET.Element,
    station: ET.Element,
    updated_at: datetime,
) -> EquipmentDetail:
    return EquipmentDetail(
        id=equipment.get("id", "").strip(),
        name=_text(equipment, "name"),
        type=_text(equipment, "type"),
        line_id=line.get("id", "").strip(),
        station_id=station.get("id", "").strip(),
        station_name=station.get("name", "").strip(),
        status=_text(equipment, "status"),
        cause=_text(equipment, "cause"),
        effect=_text(equipment, "effect"),
        start_date=parse_optional_date(_text(equipment, "start_date")),
        end_date=parse_optional_date(_text(equipment, "end_date")),
        updated_at=updated_at,
    )


def load_equipments(data: bytes, tz: tzinfo) -> tuple[EquipmentDetail, ...]:
    """Parse the equipment document into one record per equipment id.

    Raises:
        DecodeError: If the document is malformed or its charset unsupported.
        TimeParseError: If the header date/hour or an equipment date is invalid.
    """
    text = decode_document(data)
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise DecodeError(f"malformed equipment document: {e}") from e

    updated_at = combine_date_and_hour(_text(root, "info/date"), _text(root, "info/hour"), tz)

    equipments: dict[str, EquipmentDetail] = {}
    for line in root.iterfind("data/lines/line"):
        for station in line.iterfind("stations/station"):
            for equipment in station.iterfind("equipments/equipment"):
                detail = _equipment_detail(equipment, line, station, updated_at)
                if detail.id in equipments:
                    logger.debug(f"Equipment {detail.id} listed again, keeping the last entry")
                equipments[detail.id] = detail

    return tuple(equipments.values())
