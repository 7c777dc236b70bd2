"""
Millimeter based label sheet description and slot geometry.

Label sheet templates are laid out from this description instead of page
points, which is why page size conversion leaves them alone.
"""

# Standard Library
import dataclasses
import math

# PIP3 modules
import reportlab.lib.units

# local repo modules
import report_template_geometry as rtg
import report_template_geometry.models


PRESET_A4 = (210.0, 297.0)
PRESET_LETTER = (215.9, 279.4)


@dataclasses.dataclass(frozen=True)
class LabelSheetSettings:
	paper_width_mm: float = 210.0
	paper_height_mm: float = 297.0
	cols: int = 2
	rows: int = 5
	margin_mm: float = 8.0
	gap_mm: float = 2.0
	offset_x_mm: float = 0.0
	offset_y_mm: float = 0.0


@dataclasses.dataclass(frozen=True)
class SheetFit:
	cols: int
	rows: int
	total: int
	invalid: bool
	warning: str | None = None


DEFAULT_SHEET = LabelSheetSettings()

SHEET_KEYS = {
	"paperWidthMm": "paper_width_mm",
	"paperHeightMm": "paper_height_mm",
	"cols": "cols",
	"rows": "rows",
	"marginMm": "margin_mm",
	"gapMm": "gap_mm",
	"offsetXmm": "offset_x_mm",
	"offsetYmm": "offset_y_mm",
}


#============================================
def to_number(value: object, fallback: float) -> float:
	"""
	Coerce a raw value to a finite float.

	Args:
		value: Raw value, number or numeric string.
		fallback: Value used when coercion fails.

	Returns:
		Finite float.
	"""
	if isinstance(value, bool) or value is None:
		return fallback
	try:
		number = float(value)
	except (TypeError, ValueError):
		return fallback
	if not math.isfinite(number):
		return fallback
	return number


#============================================
def clamp_non_negative(value: float) -> float:
	if not math.isfinite(value):
		return 0.0
	return max(0.0, value)


#============================================
def normalize_sheet_settings(raw: dict | None) -> LabelSheetSettings:
	"""
	Normalize stored sheet settings, filling defaults for bad values.

	Args:
		raw: Stored "sheetSettings" dict with camelCase keys.

	Returns:
		LabelSheetSettings.
	"""
	source = raw if isinstance(raw, dict) else {}
	values = {}
	for json_key, field_name in SHEET_KEYS.items():
		values[field_name] = to_number(source.get(json_key), getattr(DEFAULT_SHEET, field_name))
	return LabelSheetSettings(
		paper_width_mm=values["paper_width_mm"],
		paper_height_mm=values["paper_height_mm"],
		cols=max(1, math.floor(values["cols"])),
		rows=max(1, math.floor(values["rows"])),
		margin_mm=clamp_non_negative(values["margin_mm"]),
		gap_mm=clamp_non_negative(values["gap_mm"]),
		offset_x_mm=values["offset_x_mm"],
		offset_y_mm=values["offset_y_mm"],
	)


#============================================
def derive_label_size(sheet: LabelSheetSettings) -> tuple[float, float]:
	"""
	Derive one label's size from margins, gaps, and the grid.

	Args:
		sheet: Sheet settings.

	Returns:
		Tuple of (label_width_mm, label_height_mm); zero when the grid does
		not fit the paper.
	"""
	cols = max(1, sheet.cols)
	rows = max(1, sheet.rows)
	usable_w = sheet.paper_width_mm - sheet.margin_mm * 2 - sheet.gap_mm * (cols - 1)
	usable_h = sheet.paper_height_mm - sheet.margin_mm * 2 - sheet.gap_mm * (rows - 1)
	label_w = usable_w / cols if usable_w > 0 else 0.0
	label_h = usable_h / rows if usable_h > 0 else 0.0
	return (label_w, label_h)


#============================================
def floor_count(quotient: float) -> int:
	"""
	Whole number of slots in a quotient, 0 when it is not finite.
	"""
	if not math.isfinite(quotient):
		return 0
	return max(0, math.floor(quotient))


#============================================
def compute_cols_rows(
	paper_w: float,
	paper_h: float,
	label_w: float,
	label_h: float,
	gap_x: float = 0.0,
	gap_y: float = 0.0,
	margin_left: float = 0.0,
	margin_top: float = 0.0,
) -> SheetFit:
	"""
	Count how many labels of a given size fit the paper.

	Args:
		paper_w: Paper width in mm.
		paper_h: Paper height in mm.
		label_w: Label width in mm.
		label_h: Label height in mm.
		gap_x: Horizontal gap in mm.
		gap_y: Vertical gap in mm.
		margin_left: Left margin in mm.
		margin_top: Top margin in mm.

	Returns:
		SheetFit.
	"""
	if not label_w > 0 or not label_h > 0:
		return SheetFit(cols=0, rows=0, total=0, invalid=True, warning="label size is invalid")
	gap_x = clamp_non_negative(gap_x)
	gap_y = clamp_non_negative(gap_y)
	usable_w = paper_w - clamp_non_negative(margin_left)
	usable_h = paper_h - clamp_non_negative(margin_top)
	cols = floor_count((usable_w + gap_x) / (label_w + gap_x))
	rows = floor_count((usable_h + gap_y) / (label_h + gap_y))
	invalid = cols < 1 or rows < 1
	warning = "no label fits the sheet; adjust the inputs" if invalid else None
	return SheetFit(cols=cols, rows=rows, total=cols * rows, invalid=invalid, warning=warning)


#============================================
def sheet_page_size(sheet: LabelSheetSettings) -> tuple[float, float]:
	"""
	Paper size in points.
	"""
	return (
		sheet.paper_width_mm * reportlab.lib.units.mm,
		sheet.paper_height_mm * reportlab.lib.units.mm,
	)


#============================================
def compute_slot_box(
	sheet: LabelSheetSettings,
	row: int,
	col: int,
) -> tuple[float, float, float, float]:
	"""
	Compute the bounding box for a label slot in PDF points.

	Rows count down from the top of the sheet; the box is returned in
	bottom-origin PDF space.

	Args:
		sheet: Sheet settings.
		row: Row index.
		col: Column index.

	Returns:
		Tuple of (x0, y0, x1, y1).
	"""
	label_w, label_h = derive_label_size(sheet)
	mm = reportlab.lib.units.mm
	_page_width, page_height = sheet_page_size(sheet)
	cell_x = (sheet.margin_mm + sheet.offset_x_mm + col * (label_w + sheet.gap_mm)) * mm
	cell_top = (sheet.margin_mm + sheet.offset_y_mm + row * (label_h + sheet.gap_mm)) * mm
	cell_y = page_height - cell_top - label_h * mm
	return (cell_x, cell_y, cell_x + label_w * mm, cell_y + label_h * mm)


#============================================
def iter_slot_boxes(sheet: LabelSheetSettings) -> list[tuple[float, float, float, float]]:
	"""
	All slot boxes, row by row.
	"""
	boxes = []
	for row in range(sheet.rows):
		for col in range(sheet.cols):
			boxes.append(compute_slot_box(sheet, row, col))
	return boxes


#============================================
def template_sheet_settings(template: rtg.models.Template) -> LabelSheetSettings:
	"""
	Read the sheet settings a label sheet template carries.
	"""
	return normalize_sheet_settings(template.extra.get("sheetSettings"))
