"""
Header, body, and footer region bounds.

Bounds are resolved in top-origin canvas space (y grows toward the bottom of
the page) and can be reflected into bottom-origin PDF space.
"""

# Standard Library
import math

# local repo modules
import report_template_geometry as rtg
import report_template_geometry.config
import report_template_geometry.models


RegionBounds = rtg.models.RegionBounds
RegionSpan = rtg.models.RegionSpan
Template = rtg.models.Template

DEFAULT_HEADER_BOTTOM = rtg.config.DEFAULT_HEADER_BOTTOM
DEFAULT_FOOTER_RESERVE = rtg.config.DEFAULT_FOOTER_RESERVE
REGION_NAMES = ("header", "body", "footer")


#============================================
def clamp(value: float, low: float, high: float) -> float:
	return min(max(value, low), high)


#============================================
def safe_page_height(page_height: float) -> float:
	if not math.isfinite(page_height) or page_height < 0:
		return 0.0
	return page_height


#============================================
def default_region_bounds(
	page_height: float,
	header_bottom: float = DEFAULT_HEADER_BOTTOM,
	footer_reserve: float = DEFAULT_FOOTER_RESERVE,
) -> RegionBounds:
	"""
	Build the default region bounds for a page height.

	The body always spans between the header bottom and the footer top, even
	when a large footer reserve pushes the footer above the header.

	Args:
		page_height: Page height in canvas units.
		header_bottom: Header bottom edge.
		footer_reserve: Height reserved for the footer.

	Returns:
		RegionBounds in top-origin space.
	"""
	height = safe_page_height(page_height)
	if not math.isfinite(footer_reserve):
		footer_reserve = DEFAULT_FOOTER_RESERVE
	if not math.isfinite(header_bottom):
		header_bottom = DEFAULT_HEADER_BOTTOM
	footer_top = clamp(height - footer_reserve, 0.0, height)
	header_edge = clamp(header_bottom, 0.0, height)
	return RegionBounds(
		header=RegionSpan(y_top=0.0, y_bottom=header_edge),
		body=RegionSpan(
			y_top=min(header_edge, footer_top),
			y_bottom=max(header_edge, footer_top),
		),
		footer=RegionSpan(y_top=footer_top, y_bottom=height),
	)


#============================================
def normalize_span(span: RegionSpan | None, fallback: RegionSpan, page_height: float) -> RegionSpan:
	"""
	Normalize one declared region span.

	Args:
		span: Declared span, possibly reversed or non-finite.
		fallback: Default span used for missing edges.
		page_height: Page height for clamping.

	Returns:
		RegionSpan with y_top <= y_bottom inside [0, page_height].
	"""
	if span is None:
		return fallback
	raw_top = span.y_top if math.isfinite(span.y_top) else fallback.y_top
	raw_bottom = span.y_bottom if math.isfinite(span.y_bottom) else fallback.y_bottom
	return RegionSpan(
		y_top=clamp(min(raw_top, raw_bottom), 0.0, page_height),
		y_bottom=clamp(max(raw_top, raw_bottom), 0.0, page_height),
	)


#============================================
def resolve_region_bounds(
	template: Template | None,
	page_height: float,
	header_bottom: float = DEFAULT_HEADER_BOTTOM,
	footer_reserve_height: float | None = None,
) -> RegionBounds:
	"""
	Resolve validated region bounds for a template.

	Args:
		template: Template, or None for pure defaults.
		page_height: Page height in canvas units.
		header_bottom: Header bottom edge.
		footer_reserve_height: Footer reserve override; defaults to the
			template's finite footer_reserve_height, then 150.

	Returns:
		Fully populated RegionBounds. Never raises.
	"""
	height = safe_page_height(page_height)
	reserve = footer_reserve_height
	if reserve is None or not math.isfinite(reserve):
		reserve = None
		if template is not None and template.footer_reserve_height is not None:
			if math.isfinite(template.footer_reserve_height):
				reserve = template.footer_reserve_height
	if reserve is None:
		reserve = DEFAULT_FOOTER_RESERVE
	defaults = default_region_bounds(height, header_bottom, reserve)
	if template is None or template.region_bounds is None:
		return defaults

	declared = template.region_bounds
	return RegionBounds(
		header=normalize_span(declared.header, defaults.header, height),
		body=normalize_span(declared.body, defaults.body, height),
		footer=normalize_span(declared.footer, defaults.footer, height),
	)


#============================================
def resolve_template_region_bounds(
	template: Template,
	page_dimensions: dict[str, tuple[float, float]] | None = None,
	header_bottom: float = DEFAULT_HEADER_BOTTOM,
) -> RegionBounds:
	"""
	Resolve region bounds using the template's own page height.

	Args:
		template: Template value.
		page_dimensions: Optional page size table.
		header_bottom: Header bottom edge.

	Returns:
		RegionBounds in top-origin space.
	"""
	dims = rtg.config.get_page_dimensions(template.page_size, template.orientation, page_dimensions)
	return resolve_region_bounds(template, dims.height, header_bottom=header_bottom)


#============================================
def to_bottom_origin(bounds: RegionBounds, page_height: float) -> RegionBounds:
	"""
	Reflect top-origin bounds into bottom-origin space.

	Args:
		bounds: Resolved top-origin RegionBounds.
		page_height: Page height.

	Returns:
		RegionBounds whose y_top/y_bottom are the min/max in bottom-origin
		coordinates.
	"""
	spans = {}
	for name, span in bounds.spans().items():
		reflected_top = page_height - span.y_top
		reflected_bottom = page_height - span.y_bottom
		spans[name] = RegionSpan(
			y_top=min(reflected_top, reflected_bottom),
			y_bottom=max(reflected_top, reflected_bottom),
		)
	return RegionBounds(**spans)


#============================================
def region_of(element: rtg.models.Element) -> str:
	"""
	Return the region an element belongs to, "body" when undeclared.
	"""
	if element.region in REGION_NAMES:
		return element.region
	return "body"


#============================================
def clamp_y_to_region(y: float, region: str, bounds: RegionBounds) -> float:
	"""
	Clamp a y position into one region span.

	Args:
		y: Position in the same convention as bounds.
		region: "header", "body", or "footer".
		bounds: Resolved RegionBounds.

	Returns:
		Clamped y.
	"""
	span = bounds.spans()[region]
	return clamp(y, span.y_top, span.y_bottom)
