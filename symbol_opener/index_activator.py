"""Prime the external symbol index before querying it.

Language servers typically start indexing only after they see a file of their
language, so a freshly opened project answers every query with nothing. Loading
one source file in the background is enough to wake them up. This is a
best-effort heuristic: nothing here reports success or failure.
"""

import logging
import os
from collections.abc import Sequence

from symbol_opener.find_files import BRACE_RE
from symbol_opener.host import Host
from symbol_opener.models import LangDetector

logger = logging.getLogger(__name__)


def detector_extensions(detector: LangDetector) -> set[str]:
    """Derive the file extensions a detector's source glob selects.

    ``**/*.go`` -> ``{".go"}``; ``**/*.{ts,js}`` -> ``{".ts", ".js"}``.
    """
    tail = detector.glob.rsplit("/", 1)[-1]
    if not tail.startswith("*."):
        return set()
    suffix = tail[2:]
    match = BRACE_RE.fullmatch(suffix)
    if match:
        return {f".{ext.strip()}" for ext in match.group(1).split(",") if ext.strip()}
    if any(ch in suffix for ch in "*?[{"):
        return set()
    return {f".{suffix}"}


def has_open_source_document(
    open_paths: Sequence[str], detectors: Sequence[LangDetector]
) -> bool:
    """Check whether any open document belongs to one of the detectors."""
    extensions: set[str] = set()
    for detector in detectors:
        extensions |= detector_extensions(detector)
    return any(os.path.splitext(path)[1] in extensions for path in open_paths)


async def _load_first_source(host: Host, detector: LangDetector) -> str | None:
    source_files = await host.find_files(detector.glob, detector.exclude, 1)
    if not source_files:
        return None
    await host.load_document_silently(source_files[0])
    return source_files[0]


async def activate_index(
    host: Host, detectors: Sequence[LangDetector], language: str | None = None
) -> None:
    """Make sure the index has seen at least one source file of the project."""
    relevant = [d for d in detectors if d.lang == language] if language else list(detectors)
    if has_open_source_document(host.open_document_paths(), relevant):
        logger.debug("source document already open, index assumed active")
        return

    if language:
        detector = next((d for d in detectors if d.lang == language), None)
        if detector is not None:
            opened = await _load_first_source(host, detector)
            if opened:
                logger.debug(
                    'using configured language "%s", opened %s to trigger index',
                    language,
                    opened,
                )
            return
        logger.debug(
            'configured language "%s" not found in lang_detectors, falling back to detection',
            language,
        )

    for detector in detectors:
        for marker in detector.markers:
            if not await host.find_files(marker, None, 1):
                continue
            opened = await _load_first_source(host, detector)
            if opened:
                logger.debug("detected %s, opened %s to trigger index", marker, opened)
            return
