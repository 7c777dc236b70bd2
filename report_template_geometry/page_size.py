"""
Page size and orientation conversion and normalization.

Converting rescales every element and the region bounds from one nominal page
to another. Normalizing decides whether a template overflows its declared
page and, if the content fits the other supported size, reinterprets it as
authored for that size and converts it back.
"""

# Standard Library
import dataclasses
import math

# local repo modules
import report_template_geometry as rtg
import report_template_geometry.config
import report_template_geometry.diagnostics
import report_template_geometry.models


Template = rtg.models.Template
Scale = rtg.models.Scale
RegionBounds = rtg.models.RegionBounds
RegionSpan = rtg.models.RegionSpan
DebugOptions = rtg.diagnostics.DebugOptions
EventSink = rtg.diagnostics.EventSink
GeometryConfig = rtg.config.GeometryConfig

LABEL_SHEET_STRUCTURE = rtg.config.LABEL_SHEET_STRUCTURE
SUPPORTED_PAGE_SIZES = rtg.config.SUPPORTED_PAGE_SIZES
DEFAULT_GEOMETRY = rtg.config.DEFAULT_GEOMETRY


@dataclasses.dataclass(frozen=True)
class NormalizeResult:
	template: Template
	did_normalize: bool


#============================================
def scale_number(value: float | None, scale: float) -> float | None:
	"""
	Scale an optional number, passing None and non-finite values through.
	"""
	if value is None or not math.isfinite(value):
		return value
	return value * scale


#============================================
def compute_scale(
	current: rtg.config.PageDimensions,
	target: rtg.config.PageDimensions,
) -> Scale:
	"""
	Compute independent axis scale factors between two pages.

	Args:
		current: Current page dimensions.
		target: Target page dimensions.

	Returns:
		Scale with sx, sy, and their minimum.
	"""
	sx = target.width / current.width
	sy = target.height / current.height
	return Scale(sx=sx, sy=sy, s_min=min(sx, sy))


#============================================
def scale_element_base(element: rtg.models.Element, scale: Scale) -> dict:
	"""
	Scaled base box fields shared by every element variant.
	"""
	return {
		"x": element.x * scale.sx,
		"y": element.y * scale.sy,
		"width": scale_number(element.width, scale.sx),
		"height": scale_number(element.height, scale.sy),
		"border_width": scale_number(element.border_width, scale.s_min),
		"corner_radius": scale_number(element.corner_radius, scale.s_min),
	}


#============================================
def scale_table_column(column: rtg.models.TableColumn, scale: Scale) -> rtg.models.TableColumn:
	return dataclasses.replace(
		column,
		width=column.width * scale.sx,
		min_font_size=scale_number(column.min_font_size, scale.sy),
	)


#============================================
def scale_table_summary(
	summary: rtg.models.TableSummary | None,
	scale: Scale,
) -> rtg.models.TableSummary | None:
	if summary is None or summary.style is None:
		return summary
	style = dataclasses.replace(
		summary.style,
		total_top_border_width=scale_number(summary.style.total_top_border_width, scale.s_min),
	)
	return dataclasses.replace(summary, style=style)


#============================================
def scale_element(element: rtg.models.Element, scale: Scale) -> rtg.models.Element:
	"""
	Scale one element for a page size change.

	Horizontal geometry follows sx, vertical geometry and font sizes follow
	sy, and strokes, radii, and padding follow the smaller factor so they stay
	proportionate under non-uniform scaling.

	Args:
		element: Element to scale.
		scale: Scale factors.

	Returns:
		New scaled element.
	"""
	fields = scale_element_base(element, scale)
	if element.type in ("text", "label"):
		fields["font_size"] = scale_number(element.font_size, scale.sy)
	elif element.type == "table":
		fields["row_height"] = scale_number(element.row_height, scale.sy)
		fields["header_height"] = scale_number(element.header_height, scale.sy)
		fields["columns"] = tuple(scale_table_column(column, scale) for column in element.columns)
		fields["summary"] = scale_table_summary(element.summary, scale)
	elif element.type == "cardList":
		fields["card_height"] = element.card_height * scale.sy
		fields["gap_y"] = scale_number(element.gap_y, scale.sy)
		fields["padding"] = scale_number(element.padding, scale.s_min)
	return dataclasses.replace(element, **fields)


#============================================
def convert_region_bounds(bounds: RegionBounds, scale: Scale) -> RegionBounds:
	"""
	Scale every region edge vertically.
	"""
	spans = {}
	for name, span in bounds.spans().items():
		spans[name] = RegionSpan(y_top=span.y_top * scale.sy, y_bottom=span.y_bottom * scale.sy)
	return RegionBounds(**spans)


#============================================
def convert_template_for_page_size(
	template: Template,
	next_page_size: str,
	next_orientation: str | None = None,
	debug: DebugOptions | None = None,
	page_dimensions: dict[str, tuple[float, float]] | None = None,
	sink: EventSink | None = None,
) -> Template:
	"""
	Convert a template to a new page size and orientation.

	Label sheet templates only take the new size and orientation; their
	geometry comes from the millimeter sheet description.

	Args:
		template: Template to convert.
		next_page_size: Target page size name.
		next_orientation: Target orientation, defaults to the template's.
		debug: Optional debug descriptor.
		page_dimensions: Optional page size table.
		sink: Event sink for debug events.

	Returns:
		Converted template.
	"""
	if next_orientation is None:
		next_orientation = template.orientation
	if template.structure_type == LABEL_SHEET_STRUCTURE:
		return dataclasses.replace(template, page_size=next_page_size, orientation=next_orientation)

	debug_enabled = rtg.diagnostics.is_enabled(debug)
	before = rtg.diagnostics.build_template_fingerprint(template) if debug_enabled else None
	current = rtg.config.get_page_dimensions(template.page_size, template.orientation, page_dimensions)
	target = rtg.config.get_page_dimensions(next_page_size, next_orientation, page_dimensions)
	scale = compute_scale(current, target)

	elements = tuple(scale_element(element, scale) for element in template.elements)
	region_bounds = None
	if template.region_bounds is not None:
		region_bounds = convert_region_bounds(template.region_bounds, scale)

	converted = dataclasses.replace(
		template,
		page_size=next_page_size,
		orientation=next_orientation,
		elements=elements,
		region_bounds=region_bounds,
		footer_reserve_height=scale_number(template.footer_reserve_height, scale.sy),
	)
	if debug_enabled:
		after = rtg.diagnostics.build_template_fingerprint(converted)
		rtg.diagnostics.emit(sink, debug, template, "convert_page_size", {
			"from": f"{template.page_size}/{template.orientation}",
			"to": f"{next_page_size}/{next_orientation}",
			"scaleX": scale.sx,
			"scaleY": scale.sy,
			"elements": len(elements),
			"regionBounds": 3 if region_bounds is not None else 0,
			"beforeHash": before.hash,
			"afterHash": after.hash,
			"beforeJsonLen": before.json_len,
			"afterJsonLen": after.json_len,
		})
	return converted


#============================================
def element_extent_width(element: rtg.models.Element, geometry: GeometryConfig = DEFAULT_GEOMETRY) -> float:
	"""
	Effective width used for fit checks.
	"""
	if element.type == "table":
		return sum(column.width for column in element.columns)
	if element.type == "cardList":
		return element.width if element.width is not None else geometry.card_list_width
	return element.width if element.width is not None else 0.0


#============================================
def element_extent_height(element: rtg.models.Element, geometry: GeometryConfig = DEFAULT_GEOMETRY) -> float:
	"""
	Effective height used for fit checks.

	Tables have no fixed height, so a header plus a few rows stands in for it.
	"""
	if element.type == "table":
		header = element.header_height if element.header_height is not None else geometry.table_header_height
		row = element.row_height if element.row_height is not None else geometry.table_row_height
		return header + row * geometry.estimated_table_rows
	if element.type == "cardList":
		if element.height is not None:
			return element.height
		if element.card_height is not None:
			return element.card_height
		return geometry.card_height
	return element.height if element.height is not None else 0.0


#============================================
def element_extent(
	element: rtg.models.Element,
	geometry: GeometryConfig = DEFAULT_GEOMETRY,
) -> tuple[float, float]:
	"""
	Right and bottom edges of an element in top-origin space.

	Args:
		element: Element.
		geometry: Geometry defaults.

	Returns:
		Tuple of (right, bottom).
	"""
	x = element.x if math.isfinite(element.x) else 0.0
	y = element.y if math.isfinite(element.y) else 0.0
	return (x + element_extent_width(element, geometry), y + element_extent_height(element, geometry))


#============================================
def approx_less_or_equal(value: float, limit: float, tolerance: float) -> bool:
	return math.isfinite(value) and value <= limit * (1.0 + tolerance)


#============================================
def needs_page_size_normalization(
	template: Template,
	assumed_page_size: str,
	assumed_orientation: str | None = None,
	page_dimensions: dict[str, tuple[float, float]] | None = None,
	geometry: GeometryConfig = DEFAULT_GEOMETRY,
) -> bool:
	"""
	Check whether a template overflows a candidate page.

	Args:
		template: Template to check.
		assumed_page_size: Candidate page size name.
		assumed_orientation: Candidate orientation, defaults to the template's.
		page_dimensions: Optional page size table.
		geometry: Geometry defaults, including the fit tolerance.

	Returns:
		True when content overflows either axis. Always False for label
		sheets.
	"""
	if template.structure_type == LABEL_SHEET_STRUCTURE:
		return False
	if assumed_orientation is None:
		assumed_orientation = template.orientation
	dims = rtg.config.get_page_dimensions(assumed_page_size, assumed_orientation, page_dimensions)
	max_right = 0.0
	max_bottom = 0.0
	for element in template.elements:
		right, bottom = element_extent(element, geometry)
		# NaN never compares greater, so carry it through explicitly
		if not math.isfinite(right) or right > max_right:
			max_right = right
		if not math.isfinite(bottom) or bottom > max_bottom:
			max_bottom = bottom
		if not math.isfinite(max_right) or not math.isfinite(max_bottom):
			return True
	within_width = approx_less_or_equal(max_right, dims.width, geometry.fit_tolerance)
	within_height = approx_less_or_equal(max_bottom, dims.height, geometry.fit_tolerance)
	return not (within_width and within_height)


#============================================
def normalize_template_for_page_size(
	template: Template,
	debug: DebugOptions | None = None,
	candidate_page_sizes: tuple[str, ...] = SUPPORTED_PAGE_SIZES,
	page_dimensions: dict[str, tuple[float, float]] | None = None,
	geometry: GeometryConfig = DEFAULT_GEOMETRY,
	sink: EventSink | None = None,
) -> NormalizeResult:
	"""
	Make a template fit its declared page size when a safe fix exists.

	When the content overflows the declared size but fits an alternate size,
	the template is treated as authored for that alternate and converted back
	to the declared size. Alternates are probed in candidate_page_sizes order.

	Args:
		template: Template to normalize.
		debug: Optional debug descriptor.
		candidate_page_sizes: Supported page sizes in probe order.
		page_dimensions: Optional page size table.
		geometry: Geometry defaults.
		sink: Event sink for debug events.

	Returns:
		NormalizeResult; the input template itself when nothing changed.
	"""
	if template.structure_type == LABEL_SHEET_STRUCTURE:
		return NormalizeResult(template=template, did_normalize=False)

	debug_enabled = rtg.diagnostics.is_enabled(debug)
	before = rtg.diagnostics.build_template_fingerprint(template) if debug_enabled else None
	current_size = template.page_size
	orientation = template.orientation

	needs_current = needs_page_size_normalization(
		template,
		current_size,
		orientation,
		page_dimensions=page_dimensions,
		geometry=geometry,
	)
	if not needs_current:
		if debug_enabled:
			rtg.diagnostics.emit(sink, debug, template, "normalize_page_size", {
				"pageSize": current_size,
				"didNormalize": False,
				"needsCurrent": False,
				"hash": before.hash,
				"jsonLen": before.json_len,
			})
		return NormalizeResult(template=template, did_normalize=False)

	alt_size = None
	for candidate in candidate_page_sizes:
		if candidate == current_size:
			continue
		fits = not needs_page_size_normalization(
			template,
			candidate,
			orientation,
			page_dimensions=page_dimensions,
			geometry=geometry,
		)
		if fits:
			alt_size = candidate
			break

	if alt_size is None:
		if debug_enabled:
			rtg.diagnostics.emit(sink, debug, template, "normalize_page_size", {
				"pageSize": current_size,
				"didNormalize": False,
				"fitsAlt": False,
				"hash": before.hash,
				"jsonLen": before.json_len,
			})
		return NormalizeResult(template=template, did_normalize=False)

	converted = convert_template_for_page_size(
		dataclasses.replace(template, page_size=alt_size),
		current_size,
		orientation,
		debug=debug,
		page_dimensions=page_dimensions,
		sink=sink,
	)
	if debug_enabled:
		after = rtg.diagnostics.build_template_fingerprint(converted)
		rtg.diagnostics.emit(sink, debug, template, "normalize_page_size", {
			"pageSize": current_size,
			"altSize": alt_size,
			"didNormalize": True,
			"beforeHash": before.hash,
			"afterHash": after.hash,
			"beforeJsonLen": before.json_len,
			"afterJsonLen": after.json_len,
		})
	return NormalizeResult(template=converted, did_normalize=True)
