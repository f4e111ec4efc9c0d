"""
Data Normalizer for the Breach Disclosure Sources

Turns source-specific structure into flat records (field name -> string value).

OBJECTIVE:
Every source exposes its data differently: HHS and Texas render HTML tables,
Maine renders one detail page per report with "Label: value" lines. The
normalizer owns the two conversions so that each fetcher only has to locate
the right element on the page.

RULES:
- Table headers are derived once per fetch and applied to every row, so all
  records of one fetch share the same field-name set.
- Cell and header text is the element's full text, trimmed at both ends.
- Label lines are split on ": "; lines without it are ignored.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from .source_result import Record

LABEL_SEPARATOR = ': '


class DataNormalizer:
    """Schema normalizer shared by all breach source fetchers"""

    def __init__(self, source_name: str):
        self.source_name = source_name
        self.logger = logging.getLogger(f"normalizer.{source_name}")

    @staticmethod
    def cell_text(element: Tag) -> str:
        return element.get_text().strip()

    def extract_headers(self, table: Tag) -> List[str]:
        """Header texts of a table, in column order"""
        return [self.cell_text(th) for th in table.find_all('th')]

    def zip_row(self, headers: Sequence[str], cells: Sequence[Tag]) -> Record:
        """
        Pair each cell with the header at the same column index.

        Cells past the last header are dropped and missing cells are simply
        absent, so this never produces None values.
        """
        return {header: self.cell_text(cell) for header, cell in zip(headers, cells)}

    def pad_row(self, headers: Sequence[str], cells: Sequence[Tag]) -> Record:
        """
        Pair every header with its cell, using None where the row is short.
        """
        record: Record = {}
        for index, header in enumerate(headers):
            record[header] = self.cell_text(cells[index]) if index < len(cells) else None
        return record

    def table_to_records(self, table: Tag, pad_missing: bool = False,
                         skip_empty_rows: bool = False) -> List[Record]:
        """
        Convert a table into records, skipping the header row.

        Args:
            table: The <table> element (or any element holding th/tr/td)
            pad_missing: Fill short rows with None instead of omitting keys
            skip_empty_rows: Drop rows that have no <td> cells at all

        Returns:
            One record per body row, in document order
        """
        headers = self.extract_headers(table)
        rows = table.find_all('tr')[1:]
        records: List[Record] = []

        for row in rows:
            cells = row.find_all('td')
            if skip_empty_rows and not cells:
                continue
            if pad_missing:
                records.append(self.pad_row(headers, cells))
            else:
                records.append(self.zip_row(headers, cells))

        self.logger.debug(f"Normalized {len(records)} rows against {len(headers)} headers")
        return records

    def html_to_table_records(self, html: str, selector: str = 'table', **kwargs) -> Optional[List[Record]]:
        """
        Parse an HTML document and normalize the first table matching selector.

        Returns:
            The table's records, or None when no element matches
        """
        soup = BeautifulSoup(html, 'html.parser')
        table = soup.select_one(selector)
        if table is None:
            return None
        return self.table_to_records(table, **kwargs)

    @staticmethod
    def parse_label_line(line: str) -> Optional[Tuple[str, str]]:
        """
        Split a "Label: value" line.

        The value runs up to the next ": " on the line, if any.
        """
        if LABEL_SEPARATOR not in line:
            return None
        parts = line.split(LABEL_SEPARATOR)
        return parts[0], parts[1]

    def labels_to_record(self, text: str, url: str) -> Record:
        """
        Build a record from the visible text of a detail page.

        The record always starts with the page's own URL under "URL"; page
        labels never override it.
        """
        record: Record = {'URL': url}
        for line in text.split('\n'):
            pair = self.parse_label_line(line)
            if pair is None:
                continue
            label, value = pair
            if label == 'URL':
                continue
            record[label] = value
        return record
