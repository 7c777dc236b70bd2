import pypdf
import pytest
import reportlab.lib.pagesizes

import report_template_geometry.models
import report_template_geometry.render
import report_template_geometry.template_io


#============================================
def test_preview_page_matches_template_size(tmp_path, sample_template_data: dict) -> None:
	"""
	The preview is one page at the template's page size.
	"""
	template = report_template_geometry.template_io.template_from_dict(sample_template_data)
	output_path = tmp_path / "preview.pdf"
	result = report_template_geometry.render.render_template_preview(template, output_path)
	assert output_path.exists()
	assert result.pages == 1
	assert result.elements == 4

	reader = pypdf.PdfReader(str(output_path))
	assert len(reader.pages) == 1
	box = reader.pages[0].mediabox
	width, height = reportlab.lib.pagesizes.A4
	assert float(box.width) == pytest.approx(width, abs=0.01)
	assert float(box.height) == pytest.approx(height, abs=0.01)


#============================================
def test_preview_without_regions_landscape(tmp_path) -> None:
	element = report_template_geometry.models.TextElement(id="t", x=10.0, y=10.0, width=50.0, height=10.0)
	template = report_template_geometry.models.Template(
		elements=(element,), page_size="Letter", orientation="landscape",
	)
	output_path = tmp_path / "landscape.pdf"
	result = report_template_geometry.render.render_template_preview(template, output_path, show_regions=False)
	width, height = reportlab.lib.pagesizes.landscape(reportlab.lib.pagesizes.letter)
	assert result.page_width == pytest.approx(width)
	assert result.page_height == pytest.approx(height)
	box = pypdf.PdfReader(str(output_path)).pages[0].mediabox
	assert float(box.width) == pytest.approx(width, abs=0.01)


#============================================
def test_label_sheet_preview_draws_slots(tmp_path) -> None:
	"""
	Label sheets use the millimeter paper size and draw no element boxes.
	"""
	template = report_template_geometry.models.Template(
		structure_type="label_v1",
		extra={"sheetSettings": {"paperWidthMm": 215.9, "paperHeightMm": 279.4}},
	)
	output_path = tmp_path / "labels.pdf"
	result = report_template_geometry.render.render_template_preview(template, output_path)
	assert result.elements == 0
	width, height = reportlab.lib.pagesizes.letter
	assert result.page_width == pytest.approx(width, abs=0.01)
	assert result.page_height == pytest.approx(height, abs=0.01)
	assert len(pypdf.PdfReader(str(output_path)).pages) == 1
