import math

import pytest
import reportlab.lib.units

import report_template_geometry.label_sheet
import report_template_geometry.models


label_sheet = report_template_geometry.label_sheet
MM = reportlab.lib.units.mm


#============================================
def test_default_label_size() -> None:
	"""
	A4 with 2x5 labels, 8 mm margins, and 2 mm gaps.
	"""
	label_w, label_h = label_sheet.derive_label_size(label_sheet.DEFAULT_SHEET)
	assert label_w == pytest.approx(96.0)
	assert label_h == pytest.approx(54.6)


#============================================
def test_compute_cols_rows_matches_default_grid() -> None:
	fit = label_sheet.compute_cols_rows(210.0, 297.0, 96.0, 54.6, 2.0, 2.0, 8.0, 8.0)
	assert (fit.cols, fit.rows, fit.total) == (2, 5, 10)
	assert fit.invalid is False
	assert fit.warning is None


#============================================
@pytest.mark.parametrize("paper_w,label_w,label_h", [
	(210.0, 0.0, 50.0),
	(210.0, 50.0, -1.0),
	(210.0, 300.0, 50.0),
	(math.nan, 96.0, 54.6),
	(math.inf, 96.0, 54.6),
	(210.0, math.inf, 54.6),
])
def test_compute_cols_rows_invalid(paper_w: float, label_w: float, label_h: float) -> None:
	"""
	Empty, oversized, and non-finite inputs are flagged instead of producing a grid.
	"""
	fit = label_sheet.compute_cols_rows(paper_w, 297.0, label_w, label_h)
	assert fit.invalid is True
	assert fit.total == 0
	assert fit.warning


#============================================
def test_normalize_sheet_settings() -> None:
	"""
	Stored values are coerced, clamped, or replaced with defaults.
	"""
	sheet = label_sheet.normalize_sheet_settings({
		"paperWidthMm": "215.9",
		"cols": "3",
		"rows": -2,
		"marginMm": -5,
		"gapMm": "wide",
		"offsetXmm": 1.5,
	})
	assert sheet.paper_width_mm == pytest.approx(215.9)
	assert sheet.paper_height_mm == 297.0
	assert sheet.cols == 3
	assert sheet.rows == 1
	assert sheet.margin_mm == 0.0
	assert sheet.gap_mm == 2.0
	assert sheet.offset_x_mm == 1.5
	assert label_sheet.normalize_sheet_settings(None) == label_sheet.DEFAULT_SHEET


#============================================
def test_slot_boxes_stay_on_page_without_overlap() -> None:
	sheet = label_sheet.DEFAULT_SHEET
	page_width, page_height = label_sheet.sheet_page_size(sheet)
	boxes = label_sheet.iter_slot_boxes(sheet)
	assert len(boxes) == 10
	for x0, y0, x1, y1 in boxes:
		assert x0 >= 0
		assert y0 >= -1e-9
		assert x1 <= page_width + 1e-9
		assert y1 <= page_height + 1e-9
	for index, box_a in enumerate(boxes):
		for box_b in boxes[index + 1:]:
			separate_x = box_a[2] <= box_b[0] + 1e-9 or box_b[2] <= box_a[0] + 1e-9
			separate_y = box_a[3] <= box_b[1] + 1e-9 or box_b[3] <= box_a[1] + 1e-9
			assert separate_x or separate_y


#============================================
def test_first_slot_is_top_left() -> None:
	"""
	Row 0 sits under the top margin in bottom-origin points.
	"""
	x0, y0, x1, y1 = label_sheet.compute_slot_box(label_sheet.DEFAULT_SHEET, 0, 0)
	assert x0 == pytest.approx(8.0 * MM)
	assert y1 == pytest.approx((297.0 - 8.0) * MM)
	assert x1 - x0 == pytest.approx(96.0 * MM)
	assert y1 - y0 == pytest.approx(54.6 * MM)


#============================================
def test_template_sheet_settings() -> None:
	template = report_template_geometry.models.Template(
		structure_type="label_v1",
		extra={"sheetSettings": {"cols": 3, "rows": 8}},
	)
	sheet = label_sheet.template_sheet_settings(template)
	assert (sheet.cols, sheet.rows) == (3, 8)
