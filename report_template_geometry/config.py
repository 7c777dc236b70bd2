"""
Shared configuration, constants, and page dimension lookup.
"""

# Standard Library
import dataclasses

# PIP3 modules
import reportlab.lib.pagesizes


POINTS_PER_INCH = 72.0

DEFAULT_PAGE_SIZE = "A4"
DEFAULT_ORIENTATION = "portrait"
SUPPORTED_PAGE_SIZES = ("A4", "Letter")
ORIENTATIONS = ("portrait", "landscape")

LABEL_SHEET_STRUCTURE = "label_v1"

DEFAULT_HEADER_BOTTOM = 250.0
DEFAULT_FOOTER_RESERVE = 150.0
FIT_TOLERANCE = 0.02

DEFAULT_CARD_LIST_WIDTH = 520.0
DEFAULT_CARD_HEIGHT = 90.0
DEFAULT_TABLE_HEADER_HEIGHT = 24.0
DEFAULT_TABLE_ROW_HEIGHT = 18.0
ESTIMATED_TABLE_ROWS = 3

MIN_HEIGHT_FONT_FACTOR = 1.4

AUDIT_DEFAULT_WIDTH = 140.0
AUDIT_DEFAULT_HEIGHT = 32.0

DEFAULT_FONT_REGULAR = "Helvetica"
PREVIEW_LINE_WIDTH = 0.5

PAGE_DIMENSIONS = {
	"A4": reportlab.lib.pagesizes.A4,
	"Letter": reportlab.lib.pagesizes.letter,
}


@dataclasses.dataclass(frozen=True)
class PageDimensions:
	width: float
	height: float


@dataclasses.dataclass(frozen=True)
class GeometryConfig:
	fit_tolerance: float = FIT_TOLERANCE
	card_list_width: float = DEFAULT_CARD_LIST_WIDTH
	card_height: float = DEFAULT_CARD_HEIGHT
	table_header_height: float = DEFAULT_TABLE_HEADER_HEIGHT
	table_row_height: float = DEFAULT_TABLE_ROW_HEIGHT
	estimated_table_rows: int = ESTIMATED_TABLE_ROWS


DEFAULT_GEOMETRY = GeometryConfig()


#============================================
def get_page_dimensions(
	page_size: str,
	orientation: str,
	table: dict[str, tuple[float, float]] | None = None,
) -> PageDimensions:
	"""
	Look up the page dimensions in points.

	The table stores one (width, height) pair per page size; orientation is
	applied on lookup so portrait and landscape always agree.

	Args:
		page_size: Page size name like "A4".
		orientation: "portrait" or "landscape".
		table: Optional page size table, defaults to PAGE_DIMENSIONS.

	Returns:
		PageDimensions.
	"""
	if table is None:
		table = PAGE_DIMENSIONS
	size = table[page_size]
	if orientation == "landscape":
		width, height = reportlab.lib.pagesizes.landscape(size)
	else:
		width, height = reportlab.lib.pagesizes.portrait(size)
	return PageDimensions(width=float(width), height=float(height))

