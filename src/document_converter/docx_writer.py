"""Serialize converted blocks into a .docx byte stream.

Uses python-docx to build the document. Headings map onto the built-in
"Heading 1".."Heading 6" styles and list items onto two numbering presets
(bullet and ordered) registered in the document's numbering part.
"""

import io
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from docx import Document
from docx.enum.text import WD_UNDERLINE
from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.oxml import OxmlElement, parse_xml
from docx.oxml.ns import nsdecls, qn
from docx.shared import RGBColor

from .errors import DocumentWriteError
from .models import Block, Heading, ListItem, ListKind, TextRun, number_list_items

logger = logging.getLogger(__name__)

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# (numFmt, lvlText, left indent in twips) per nesting level
BULLET_LEVELS: Sequence[Tuple[str, str, int]] = (
    ("bullet", "●", 720),
    ("bullet", "○", 1440),
)
ORDERED_LEVELS: Sequence[Tuple[str, str, int]] = (
    ("decimal", "%1.", 720),
    ("lowerLetter", "%2.", 1440),
)
HANGING_INDENT = 360

# Block heading level (0-5) -> paragraph style
HEADING_STYLES: Dict[int, str] = {level: f"Heading {level + 1}" for level in range(6)}

LIST_PARAGRAPH_STYLE = "List Paragraph"


class _ListNumbering:
    """Numbering definitions for one document.

    Registers one abstract definition per list kind on first use. Bullet
    items share a single numbering instance; every ordered list gets its
    own instance so its counter restarts at 1.
    """

    def __init__(self, document):
        self._numbering = document.part.numbering_part.element
        self._abstract_ids: Dict[ListKind, int] = {}
        self._bullet_num_id: Optional[int] = None

    def bullet_num_id(self) -> int:
        if self._bullet_num_id is None:
            abstract_id = self._abstract_id(ListKind.BULLET)
            self._bullet_num_id = self._numbering.add_num(abstract_id).numId
        return self._bullet_num_id

    def new_ordered_num_id(self) -> int:
        abstract_id = self._abstract_id(ListKind.ORDERED)
        num = self._numbering.add_num(abstract_id)
        for ilvl in range(len(ORDERED_LEVELS)):
            num.add_lvlOverride(ilvl=ilvl).add_startOverride(1)
        return num.numId

    def _abstract_id(self, kind: ListKind) -> int:
        if kind not in self._abstract_ids:
            levels = BULLET_LEVELS if kind is ListKind.BULLET else ORDERED_LEVELS
            existing = [int(v) for v in self._numbering.xpath("./w:abstractNum/@w:abstractNumId")]
            abstract_id = max(existing, default=-1) + 1
            abstract = parse_xml(self._abstract_num_xml(abstract_id, levels))
            # abstractNum elements must precede num elements
            first_num = self._numbering.find(qn("w:num"))
            if first_num is not None:
                first_num.addprevious(abstract)
            else:
                self._numbering.append(abstract)
            self._abstract_ids[kind] = abstract_id
        return self._abstract_ids[kind]

    @staticmethod
    def _abstract_num_xml(abstract_id: int, levels: Sequence[Tuple[str, str, int]]) -> str:
        lvls = "".join(
            f'<w:lvl w:ilvl="{ilvl}">'
            f'<w:start w:val="1"/>'
            f'<w:numFmt w:val="{num_fmt}"/>'
            f'<w:lvlText w:val="{lvl_text}"/>'
            f'<w:lvlJc w:val="left"/>'
            f'<w:pPr><w:ind w:left="{indent}" w:hanging="{HANGING_INDENT}"/></w:pPr>'
            f'</w:lvl>'
            for ilvl, (num_fmt, lvl_text, indent) in enumerate(levels)
        )
        return (
            f'<w:abstractNum {nsdecls("w")} w:abstractNumId="{abstract_id}">'
            f'<w:multiLevelType w:val="hybridMultilevel"/>'
            f'{lvls}'
            f'</w:abstractNum>'
        )


class DocxWriter:
    """Writes a block sequence as a Word document.

    Example:
        >>> blocks = HtmlConverter().convert("<h1>Jane Doe</h1>")
        >>> data = DocxWriter().write(blocks)
        >>> data[:2]
        b'PK'
    """

    def write(self, blocks: List[Block]) -> bytes:
        """Serialize blocks into .docx bytes.

        Args:
            blocks: Blocks in document order

        Returns:
            The .docx file content

        Raises:
            DocumentWriteError: If python-docx fails to build or save the document
        """
        try:
            document = self._build_document(blocks)
            buffer = io.BytesIO()
            document.save(buffer)
        except Exception as e:
            logger.error(f"Failed to build .docx from {len(blocks)} block(s): {e}")
            raise DocumentWriteError(str(e)) from e

        data = buffer.getvalue()
        logger.debug(f"Wrote .docx with {len(blocks)} block(s), {len(data)} bytes")
        return data

    def write_to(self, blocks: List[Block], output_path: Path) -> Path:
        """Serialize blocks and save them to a file.

        Raises:
            DocumentWriteError: If building the document or writing the file fails
        """
        data = self.write(blocks)
        output_path = Path(output_path)
        try:
            output_path.write_bytes(data)
        except OSError as e:
            raise DocumentWriteError(f"cannot write {output_path}: {e}") from e
        return output_path

    def _build_document(self, blocks: List[Block]):
        document = Document()
        numbering = _ListNumbering(document)
        # nesting level -> numbering instance of the ordered list open there
        ordered_num_ids: Dict[int, int] = {}

        for block, ordinal in zip(blocks, number_list_items(blocks)):
            if isinstance(block, ListItem):
                if block.kind is ListKind.BULLET:
                    num_id = numbering.bullet_num_id()
                else:
                    if ordinal == 1:
                        ordered_num_ids[block.nesting_level] = numbering.new_ordered_num_id()
                    num_id = ordered_num_ids[block.nesting_level]
                paragraph = document.add_paragraph(style=LIST_PARAGRAPH_STYLE)
                self._set_numbering(paragraph, num_id, block.nesting_level)
            elif isinstance(block, Heading):
                paragraph = document.add_paragraph(style=HEADING_STYLES[block.level])
            else:
                paragraph = document.add_paragraph()

            self._add_runs(paragraph, block.runs)

        return document

    @staticmethod
    def _set_numbering(paragraph, num_id: int, nesting_level: int) -> None:
        ilvl = min(nesting_level, len(BULLET_LEVELS) - 1)
        num_pr = paragraph._p.get_or_add_pPr().get_or_add_numPr()
        num_pr.get_or_add_ilvl().val = ilvl
        num_pr.get_or_add_numId().val = num_id

    def _add_runs(self, paragraph, runs: List[TextRun]) -> None:
        previous: Optional[TextRun] = None
        for run in runs:
            if run.is_break:
                paragraph.add_run().add_break()
            else:
                text = " " + run.text if run.needs_space_after(previous) else run.text
                self._add_text_run(paragraph, run, text)
            previous = run

    @staticmethod
    def _add_text_run(paragraph, run: TextRun, text: str) -> None:
        style = run.style
        docx_run = paragraph.add_run(text)
        if style.bold:
            docx_run.bold = True
        if style.italic:
            docx_run.italic = True
        if style.underline:
            docx_run.font.underline = WD_UNDERLINE.SINGLE
        if style.color:
            docx_run.font.color.rgb = RGBColor.from_string(style.color.upper())

        if style.href:
            # Move the styled run inside an external hyperlink element
            r_id = paragraph.part.relate_to(style.href, RT.HYPERLINK, is_external=True)
            hyperlink = OxmlElement("w:hyperlink")
            hyperlink.set(qn("r:id"), r_id)
            hyperlink.append(docx_run._r)
            paragraph._p.append(hyperlink)
