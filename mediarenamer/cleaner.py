"""Filename cleaning for "Title (Year)" renames.

Turns a noisy scene-release name such as
``The.Matrix.1999.1080p.BluRay.x264-GROUP.mkv`` into
``The Matrix (1999).mkv``.  The transform is purely textual: it never
touches the filesystem and knows nothing about real titles, so it is a
best-effort heuristic rather than a metadata lookup.

Pipeline:

1. split off the extension (and a subtitle language code before ``.srt``)
2. normalise punctuation and strip bracketed release tags
3. scan tokens left to right until a year or an unwanted term is found
4. reassemble ``"{title} ({year})"`` plus the preserved extensions
"""

import logging
import os
import re

from .terms import SUBTITLE_EXTENSION, is_language_code, is_unwanted

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# Bracketed or braced spans, e.g. "[YTS.MX]" or "{Extended}".
_BRACKETS = r'[\[\{].*?[\]\}]'

# Anything that is not a word character or whitespace.
_PUNCTUATION = r'[^\w\s]'

_WHITESPACE = r'\s+'

# Whole-token years in the 1900-2099 family.
_YEAR = re.compile(r'^(19|20)\d{2}$')
_YEAR_RANGE = re.compile(r'^(19|20)\d{2}-(19|20)\d{2}$')

# Characters trimmed from both ends of the assembled title.
_TITLE_TRIM = "-_()[]{}'"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def base_name(full_path: str) -> str:
    """Final path segment of *full_path*."""
    return os.path.basename(full_path)


def split_extension(name: str) -> tuple[str, str]:
    """Split *name* at its last dot.

    Returns ``(stem, extension)``.  The extension keeps its dot.  A name
    ending in a dot has no extension but still loses the dot; a name
    without any dot is returned unchanged with an empty extension.
    """
    index = name.rfind('.')
    if index < 0:
        return name, ""
    if index == len(name) - 1:
        return name[:index], ""
    return name[:index], name[index:]


def split_extensions(name: str) -> tuple[str, str, str]:
    """
    Separate a file name into stem, language extension and extension.

    For "Movie.en.srt" returns ("Movie", ".en", ".srt").
    For "Movie.final.srt" returns ("Movie.final", "", ".srt").
    For "Movie.mkv" returns ("Movie", "", ".mkv").
    """
    stem, extension = split_extension(name)

    if extension.lower() != SUBTITLE_EXTENSION:
        return stem, "", extension

    inner_stem, language = split_extension(stem)
    if language and is_language_code(language):
        return inner_stem, language, extension

    return stem, "", extension


def normalize_punctuation(name: str) -> str:
    """Reduce *name* to space-separated alphanumeric words."""
    name = name.replace('.', ' ')
    name = re.sub(_BRACKETS, '', name, flags=re.IGNORECASE)
    name = name.replace('_', ' ').replace('-', ' ')
    name = re.sub(_PUNCTUATION, ' ', name)
    name = re.sub(_WHITESPACE, ' ', name)
    return name.strip()


def extract_title_and_year(words: list[str]) -> tuple[str, str]:
    """
    Scan *words* left to right and collect the title.

    Scanning stops at the first year (which is recorded) or the first
    unwanted term (which is not).  Nothing after the stopping token is
    used.

    Returns:
        Tuple of (title, year); year is "" when none was found.
    """
    title_words = []
    year = ""

    for word in words:
        if _YEAR.match(word):
            year = word
            break
        if _YEAR_RANGE.match(word):
            year = word[:4]
            break
        if is_unwanted(word):
            break
        title_words.append(word)

    title = " ".join(title_words)
    title = re.sub(_WHITESPACE, ' ', title).strip(_TITLE_TRIM)
    return title, year


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def clean_name(full_path: str, is_directory: bool = False) -> str:
    """Compute the cleaned name for a file or directory.

    Parameters
    ----------
    full_path:
        Path of the entry.  Only the final segment is used.
    is_directory:
        Directories get no extension handling; the whole name is cleaned.

    Returns
    -------
    str
        ``"{title} ({year})"`` or just ``title`` when no year was found,
        followed for files by the original language extension and
        extension, unchanged in case.
    """
    name = base_name(full_path)

    if is_directory:
        stem, language, extension = name, "", ""
    else:
        stem, language, extension = split_extensions(name)

    words = normalize_punctuation(stem).split(' ')
    title, year = extract_title_and_year([w for w in words if w])

    log.debug("Cleaned %r: title=%r year=%r", name, title, year)

    if year:
        new_name = f"{title} ({year})"
    else:
        new_name = title

    if not is_directory:
        new_name += language + extension

    return new_name


def names_match(name1: str, name2: str) -> bool:
    """
    Check if two names are the same, ignoring case.

    Args:
        name1: First name
        name2: Second name

    Returns:
        True if no rename is needed between them
    """
    return name1.lower() == name2.lower()
