"""
Outline preview of a template's geometry.
"""

# Standard Library
import dataclasses
import io
import pathlib

# PIP3 modules
import pypdf
import reportlab.pdfgen.canvas

# local repo modules
import report_template_geometry as rtg
import report_template_geometry.config
import report_template_geometry.label_sheet
import report_template_geometry.layout_audit
import report_template_geometry.models
import report_template_geometry.regions
import report_template_geometry.transform


Template = rtg.models.Template
PdfTransform = rtg.transform.PdfTransform

LABEL_SHEET_STRUCTURE = rtg.config.LABEL_SHEET_STRUCTURE
DEFAULT_FONT_REGULAR = rtg.config.DEFAULT_FONT_REGULAR
PREVIEW_LINE_WIDTH = rtg.config.PREVIEW_LINE_WIDTH
POINTS_PER_INCH = rtg.config.POINTS_PER_INCH
ID_FONT_SIZE = 6.0
REGION_FILL_GRAY = {
	"header": 0.92,
	"body": 1.0,
	"footer": 0.88,
}


@dataclasses.dataclass
class PreviewResult:
	pages: int
	elements: int
	page_width: float
	page_height: float


#============================================
def draw_element_outlines(
	pdf: reportlab.pdfgen.canvas.Canvas,
	template: Template,
	transform: PdfTransform,
) -> int:
	"""
	Draw each element's box and id.

	Args:
		pdf: ReportLab canvas.
		template: Template to draw.
		transform: Canvas to page transform.

	Returns:
		Number of element boxes drawn.
	"""
	pdf.setLineWidth(PREVIEW_LINE_WIDTH)
	pdf.setStrokeColorRGB(0.2, 0.2, 0.7)
	pdf.setFont(DEFAULT_FONT_REGULAR, ID_FONT_SIZE)
	count = 0
	for element in template.elements:
		width = rtg.layout_audit.audit_width(element)
		height = rtg.layout_audit.audit_height(element)
		x, y, w, h = transform.to_pdf_rect(element.x, element.y, width, height)
		pdf.rect(x, y, w, h, stroke=1, fill=0)
		pdf.drawString(x + 1.0, transform.to_pdf_y_top(element.y) - ID_FONT_SIZE, element.id)
		count += 1
	return count


#============================================
def draw_region_bands(
	pdf: reportlab.pdfgen.canvas.Canvas,
	bounds: rtg.models.RegionBounds,
	transform: PdfTransform,
) -> None:
	"""
	Shade the header and footer bands and mark every region edge.

	Args:
		pdf: ReportLab canvas.
		bounds: Top-origin region bounds.
		transform: Canvas to page transform.
	"""
	page_width = transform.page_width_pt
	pdf.setLineWidth(PREVIEW_LINE_WIDTH)
	pdf.setStrokeColorRGB(0.7, 0.2, 0.2)
	pdf.setFont(DEFAULT_FONT_REGULAR, ID_FONT_SIZE)
	for name, span in bounds.spans().items():
		height = span.y_bottom - span.y_top
		y = transform.to_pdf_y_box(span.y_top, height)
		gray = REGION_FILL_GRAY[name]
		pdf.setFillGray(gray)
		pdf.rect(0.0, y, page_width, transform.to_pdf_h(height), stroke=1, fill=1)
		pdf.setFillGray(0.3)
		pdf.drawRightString(page_width - 2.0, transform.to_pdf_y_top(span.y_top) - ID_FONT_SIZE, name)


#============================================
def draw_slot_outlines(
	pdf: reportlab.pdfgen.canvas.Canvas,
	sheet: rtg.label_sheet.LabelSheetSettings,
) -> int:
	"""
	Draw label slot outlines for a label sheet.

	Args:
		pdf: ReportLab canvas.
		sheet: Sheet settings.

	Returns:
		Number of slots drawn.
	"""
	pdf.setLineWidth(0.3)
	pdf.setStrokeColorRGB(0.7, 0.7, 0.7)
	boxes = rtg.label_sheet.iter_slot_boxes(sheet)
	for x0, y0, x1, y1 in boxes:
		pdf.rect(x0, y0, x1 - x0, y1 - y0, stroke=1, fill=0)
	return len(boxes)


#============================================
def draw_ruler(pdf: reportlab.pdfgen.canvas.Canvas, page_height: float) -> None:
	"""
	Draw a 1 inch ruler mark in the top left corner.
	"""
	ruler_x = 18.0
	ruler_y = page_height - 12.0
	pdf.setStrokeColorRGB(0.0, 0.0, 0.0)
	pdf.setLineWidth(0.6)
	pdf.line(ruler_x, ruler_y, ruler_x + POINTS_PER_INCH, ruler_y)
	pdf.setFillGray(0.0)
	pdf.setFont(DEFAULT_FONT_REGULAR, 8)
	pdf.drawString(ruler_x + POINTS_PER_INCH + 4.0, ruler_y - 3.0, "1 in")


#============================================
def build_region_overlay(
	bounds: rtg.models.RegionBounds,
	transform: PdfTransform,
) -> pypdf.PageObject:
	"""
	Build a PDF overlay page with the region bands.

	Args:
		bounds: Top-origin region bounds.
		transform: Canvas to page transform.

	Returns:
		PDF page object.
	"""
	buffer = io.BytesIO()
	page_size = (transform.page_width_pt, transform.page_height_pt)
	pdf = reportlab.pdfgen.canvas.Canvas(buffer, pagesize=page_size)
	draw_region_bands(pdf, bounds, transform)
	pdf.save()
	buffer.seek(0)
	reader = pypdf.PdfReader(buffer)
	return reader.pages[0]


#============================================
def render_template_preview(
	template: Template,
	output_path: pathlib.Path,
	page_dimensions: dict[str, tuple[float, float]] | None = None,
	canvas_size: tuple[float, float] | None = None,
	show_regions: bool = True,
) -> PreviewResult:
	"""
	Write a one page outline preview of a template.

	Region bands are drawn on a separate page and placed under the element
	outlines, so the outlines stay on top.

	Args:
		template: Template to preview.
		output_path: Output PDF path.
		page_dimensions: Optional page size table.
		canvas_size: Editor canvas (width, height); defaults to the page size.
		show_regions: Whether to draw the region bands.

	Returns:
		PreviewResult.
	"""
	if template.structure_type == LABEL_SHEET_STRUCTURE:
		sheet = rtg.label_sheet.template_sheet_settings(template)
		page_width, page_height = rtg.label_sheet.sheet_page_size(sheet)
	else:
		dims = rtg.config.get_page_dimensions(template.page_size, template.orientation, page_dimensions)
		page_width, page_height = dims.width, dims.height
	if canvas_size is None:
		canvas_size = (page_width, page_height)
	transform = rtg.transform.build_pdf_transform(
		page_width,
		page_height,
		canvas_size[0],
		canvas_size[1],
		y_mode="top",
	)

	buffer = io.BytesIO()
	pdf = reportlab.pdfgen.canvas.Canvas(buffer, pagesize=(page_width, page_height))
	if template.structure_type == LABEL_SHEET_STRUCTURE:
		draw_slot_outlines(pdf, sheet)
		count = 0
	else:
		count = draw_element_outlines(pdf, template, transform)
	draw_ruler(pdf, page_height)
	pdf.save()
	buffer.seek(0)
	content_page = pypdf.PdfReader(buffer).pages[0]

	if show_regions and template.structure_type != LABEL_SHEET_STRUCTURE:
		bounds = rtg.regions.resolve_region_bounds(template, canvas_size[1])
		page = build_region_overlay(bounds, transform)
		page.merge_page(content_page)
	else:
		page = content_page

	writer = pypdf.PdfWriter()
	writer.add_page(page)
	writer.write(str(output_path))
	return PreviewResult(
		pages=1,
		elements=count,
		page_width=page_width,
		page_height=page_height,
	)
