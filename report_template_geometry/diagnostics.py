"""
Debug descriptors, template fingerprints, and structured event sinks.

Events are observability only; nothing recorded here feeds back into the
geometry results.
"""

# Standard Library
import dataclasses
import json
import typing

# local repo modules
import report_template_geometry as rtg
import report_template_geometry.models
import report_template_geometry.template_io


FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193

EVENT_TAGS = {
	"convert_page_size": "DBG_CONVERT_PAGESIZE",
	"normalize_page_size": "DBG_NORMALIZE_PAGESIZE",
}


@dataclasses.dataclass(frozen=True)
class DebugOptions:
	enabled: bool = False
	request_id: str = ""
	reason: str = ""
	template_id: str | None = None


@dataclasses.dataclass(frozen=True)
class Fingerprint:
	hash: str
	json_len: int
	elements: int


class EventSink(typing.Protocol):
	def record(self, event: dict) -> None:
		...


class PrintEventSink:
	"""
	Print each event as one tagged key=value line.
	"""

	def record(self, event: dict) -> None:
		print(format_event(event))


class ListEventSink:
	"""
	Collect events in memory.
	"""

	def __init__(self) -> None:
		self.events: list[dict] = []

	def record(self, event: dict) -> None:
		self.events.append(event)


#============================================
def format_event(event: dict) -> str:
	"""
	Format an event as a single log line.

	Args:
		event: Event dict with an "event" name.

	Returns:
		Line like "[DBG_CONVERT_PAGESIZE] requestId=... scaleX=...".
	"""
	name = str(event.get("event", ""))
	tag = EVENT_TAGS.get(name, name.upper())
	parts = []
	for key, value in event.items():
		if key == "event":
			continue
		if isinstance(value, float):
			value = f"{value:.6f}"
		elif isinstance(value, bool):
			value = str(value).lower()
		elif value is None:
			value = ""
		parts.append(f"{key}={value}")
	return f"[{tag}] " + " ".join(parts)


#============================================
def canonical_json(template: rtg.models.Template) -> str:
	"""
	Serialize a template with sorted keys and no whitespace.
	"""
	data = rtg.template_io.template_to_dict(template)
	return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


#============================================
def fnv1a_hex(text: str) -> str:
	"""
	Hash a string with 32-bit FNV-1a over its UTF-16 code units.

	Characters outside the Basic Multilingual Plane hash as their surrogate
	pair, so fingerprints agree with the editor for any text.

	Args:
		text: Input string.

	Returns:
		Eight hex digit hash.
	"""
	value = FNV_OFFSET_BASIS
	encoded = text.encode("utf-16-le", "surrogatepass")
	for index in range(0, len(encoded), 2):
		value ^= encoded[index] | (encoded[index + 1] << 8)
		value = (value * FNV_PRIME) & 0xFFFFFFFF
	return f"{value:08x}"


#============================================
def utf16_length(text: str) -> int:
	return len(text.encode("utf-16-le", "surrogatepass")) // 2


#============================================
def build_template_fingerprint(template: rtg.models.Template) -> Fingerprint:
	"""
	Fingerprint a template for before/after debug comparisons.

	Args:
		template: Template value.

	Returns:
		Fingerprint.
	"""
	text = canonical_json(template)
	return Fingerprint(
		hash=fnv1a_hex(text),
		json_len=utf16_length(text),
		elements=len(template.elements),
	)


#============================================
def is_enabled(debug: DebugOptions | None) -> bool:
	return debug is not None and debug.enabled


#============================================
def emit(
	sink: EventSink | None,
	debug: DebugOptions,
	template: rtg.models.Template,
	name: str,
	fields: dict,
) -> None:
	"""
	Record one debug event with the common request fields.

	Args:
		sink: Event sink, defaults to PrintEventSink.
		debug: Enabled DebugOptions.
		template: Template the event describes.
		name: Event name.
		fields: Event specific fields.
	"""
	if sink is None:
		sink = PrintEventSink()
	template_id = debug.template_id if debug.template_id is not None else template.id
	event = {
		"event": name,
		"requestId": debug.request_id,
		"templateId": template_id,
		"reason": debug.reason,
	}
	event.update(fields)
	sink.record(event)
