"""
Element box audit against page width, regions, and each other.
"""

# Standard Library
import dataclasses

# local repo modules
import report_template_geometry as rtg
import report_template_geometry.config
import report_template_geometry.models
import report_template_geometry.regions


AUDIT_DEFAULT_WIDTH = rtg.config.AUDIT_DEFAULT_WIDTH
AUDIT_DEFAULT_HEIGHT = rtg.config.AUDIT_DEFAULT_HEIGHT
DEFAULT_CARD_LIST_WIDTH = rtg.config.DEFAULT_CARD_LIST_WIDTH
DEFAULT_TABLE_HEADER_HEIGHT = rtg.config.DEFAULT_TABLE_HEADER_HEIGHT
DEFAULT_TABLE_ROW_HEIGHT = rtg.config.DEFAULT_TABLE_ROW_HEIGHT
ESTIMATED_TABLE_ROWS = rtg.config.ESTIMATED_TABLE_ROWS


@dataclasses.dataclass(frozen=True)
class ElementBox:
	id: str
	region: str
	x: float
	y_top: float
	y_bottom: float
	width: float
	height: float


@dataclasses.dataclass(frozen=True)
class LayoutIssue:
	id: str
	kind: str
	message: str


#============================================
def audit_width(element: rtg.models.Element) -> float:
	if element.type == "table":
		return sum(column.width for column in element.columns)
	if element.type == "cardList":
		return element.width if element.width is not None else DEFAULT_CARD_LIST_WIDTH
	return element.width if element.width is not None else AUDIT_DEFAULT_WIDTH


#============================================
def audit_height(element: rtg.models.Element) -> float:
	if element.type == "table":
		header = element.header_height if element.header_height is not None else DEFAULT_TABLE_HEADER_HEIGHT
		row = element.row_height if element.row_height is not None else DEFAULT_TABLE_ROW_HEIGHT
		return header + row * ESTIMATED_TABLE_ROWS
	if element.type == "cardList":
		return element.card_height
	return element.height if element.height is not None else AUDIT_DEFAULT_HEIGHT


#============================================
def compute_element_box(
	element: rtg.models.Element,
	page_height: float,
	y_mode: str = "top",
) -> ElementBox:
	"""
	Compute an element's top-origin box.

	Args:
		element: Element.
		page_height: Page height, used to flip bottom-origin positions.
		y_mode: "top" when element.y is the top edge measured downward,
			"bottom" when it is the lower edge measured upward.

	Returns:
		ElementBox.
	"""
	width = audit_width(element)
	height = audit_height(element)
	if y_mode == "bottom":
		y_top = page_height - element.y - height
	else:
		y_top = element.y
	return ElementBox(
		id=element.id,
		region=rtg.regions.region_of(element),
		x=element.x,
		y_top=y_top,
		y_bottom=y_top + height,
		width=width,
		height=height,
	)


#============================================
def boxes_overlap(box_a: ElementBox, box_b: ElementBox) -> bool:
	"""
	Check whether two element boxes overlap with positive area.
	"""
	overlaps_x = box_a.x < box_b.x + box_b.width and box_a.x + box_a.width > box_b.x
	overlaps_y = box_a.y_top < box_b.y_bottom and box_a.y_bottom > box_b.y_top
	return overlaps_x and overlaps_y


#============================================
def find_layout_issues(
	template: rtg.models.Template,
	region_bounds: rtg.models.RegionBounds,
	page_width: float,
	page_height: float,
	y_mode: str = "top",
) -> list[LayoutIssue]:
	"""
	Audit element boxes of a template.

	Args:
		template: Template to audit.
		region_bounds: Resolved top-origin region bounds.
		page_width: Page width.
		page_height: Page height.
		y_mode: Element y convention, see compute_element_box.

	Returns:
		List of LayoutIssue, in element order.
	"""
	boxes = [compute_element_box(element, page_height, y_mode) for element in template.elements]
	spans = region_bounds.spans()
	issues: list[LayoutIssue] = []

	for box in boxes:
		if not box.width > 0 or not box.height > 0:
			issues.append(LayoutIssue(id=box.id, kind="invalid", message="size is invalid"))
		span = spans[box.region]
		outside_page = box.x < 0 or box.x + box.width > page_width
		outside_region = box.y_top < span.y_top or box.y_bottom > span.y_bottom
		if outside_page or outside_region:
			issues.append(LayoutIssue(id=box.id, kind="out_of_region", message=f"outside {box.region} region"))

	for index, box_a in enumerate(boxes):
		for box_b in boxes[index + 1:]:
			if boxes_overlap(box_a, box_b):
				issues.append(LayoutIssue(id=box_a.id, kind="overlap", message=f"overlaps {box_b.id}"))
	return issues
