"""
CLI entry points for template page size conversion and normalization.
"""

# Standard Library
import argparse
import pathlib
import time
import uuid

# local repo modules
import report_template_geometry as rtg
import report_template_geometry.config
import report_template_geometry.diagnostics
import report_template_geometry.layout_audit
import report_template_geometry.models
import report_template_geometry.page_size
import report_template_geometry.regions
import report_template_geometry.render
import report_template_geometry.template_io


DebugOptions = rtg.diagnostics.DebugOptions

SUPPORTED_PAGE_SIZES = rtg.config.SUPPORTED_PAGE_SIZES
ORIENTATIONS = rtg.config.ORIENTATIONS


#============================================
def build_debug_options(args: argparse.Namespace, reason: str) -> DebugOptions | None:
	"""
	Build debug options from CLI args.

	Args:
		args: Parsed argparse namespace.
		reason: Reason recorded with each debug event.

	Returns:
		DebugOptions, or None when debugging is off.
	"""
	if not args.debug:
		return None
	return DebugOptions(enabled=True, request_id=uuid.uuid4().hex[:12], reason=reason)


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Optional argument list, defaults to sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Convert or normalize report template page geometry.")
	parser.add_argument("input_path", help="Template JSON file.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", default=None, help="Output template JSON path.")
	output_group.add_argument("-p", "--preview", dest="preview_path", default=None, help="Write an outline preview PDF.")

	page_group = parser.add_argument_group("Page")
	page_group.add_argument(
		"-s", "--to-size", dest="to_size", choices=SUPPORTED_PAGE_SIZES, default=None,
		help="Convert to this page size instead of normalizing.",
	)
	page_group.add_argument(
		"-r", "--orientation", dest="orientation", choices=ORIENTATIONS, default=None,
		help="Target orientation for conversion.",
	)

	behavior_group = parser.add_argument_group("Behavior")
	behavior_group.add_argument("-a", "--audit", dest="audit", action="store_true", help="Print layout issues.")
	behavior_group.add_argument("-d", "--debug", dest="debug", action="store_true", help="Print debug events.")
	behavior_group.add_argument("-R", "--no-regions", dest="show_regions", action="store_false", help="Omit region bands in the preview.")

	parser.set_defaults(
		audit=False,
		debug=False,
		show_regions=True,
	)

	args = parser.parse_args(argv)
	return args


#============================================
def run_pipeline(args: argparse.Namespace) -> rtg.models.Template:
	"""
	Load, convert or normalize, and write a template.

	Args:
		args: Parsed argparse namespace.

	Returns:
		The resulting template.
	"""
	input_path = pathlib.Path(args.input_path)
	print(f"Template: {input_path}")
	start_time = time.perf_counter()
	template = rtg.template_io.load_template(input_path)
	print(f"Elements: {len(template.elements)}")
	print(f"Page: {template.page_size}/{template.orientation}")

	if args.to_size is not None or args.orientation is not None:
		next_size = args.to_size if args.to_size is not None else template.page_size
		debug = build_debug_options(args, "cli_convert")
		result = rtg.page_size.convert_template_for_page_size(
			template,
			next_size,
			args.orientation,
			debug=debug,
		)
		print(f"Converted to: {result.page_size}/{result.orientation}")
	else:
		debug = build_debug_options(args, "cli_normalize")
		normalized = rtg.page_size.normalize_template_for_page_size(template, debug=debug)
		result = normalized.template
		print(f"Normalized: {normalized.did_normalize}")

	if args.audit:
		dims = rtg.config.get_page_dimensions(result.page_size, result.orientation)
		bounds = rtg.regions.resolve_region_bounds(result, dims.height)
		issues = rtg.layout_audit.find_layout_issues(result, bounds, dims.width, dims.height)
		print(f"Layout issues: {len(issues)}")
		for issue in issues:
			print(f"  {issue.id}: {issue.kind} ({issue.message})")

	if args.output_path:
		output_path = pathlib.Path(args.output_path)
		rtg.template_io.write_template(output_path, result)
		print(f"Template written: {output_path}")

	if args.preview_path:
		preview_path = pathlib.Path(args.preview_path)
		preview = rtg.render.render_template_preview(result, preview_path, show_regions=args.show_regions)
		print(f"Preview written: {preview_path} ({preview.elements} elements)")

	total_time = time.perf_counter() - start_time
	print(f"Timing: total={total_time:.2f}s")
	return result


#============================================
def main(argv: list[str] | None = None) -> None:
	"""
	Main entry point.
	"""
	args = parse_args(argv)
	run_pipeline(args)
