"""Fixed vocabularies used by the name cleaner.

Unwanted terms are stored uppercase and language codes lowercase; neither
set is mutated after import.
"""

# Tokens that mark the end of the meaningful part of a name.  Lookups
# compare against the uppercased token, so entries are uppercased here.
# Entries with spaces, dashes, dots or plus signs can never equal a
# normalized token; they are kept as part of the vocabulary anyway.
_UNWANTED = [
    # Resolutions and video quality
    "1080p", "720p", "480p", "2160p", "4K", "8K", "HD", "HDTV", "SD", "HQ",
    "10bit", "8bit", "HEVC", "AVC", "H264", "H265", "x264", "x265",
    # Source and encoding
    "BluRay", "BRRip", "BDRip", "WEBRip", "WEB", "WEB-DL", "HDRip",
    "DVDRip", "REMUX", "CAM", "TS", "R5",
    # Audio codecs and configurations
    "AAC", "AC3", "EAC3", "DTS", "DTS-HD", "DTSHD", "MA", "TRUEHD", "MP3",
    "FLAC", "OGG", "DDP5", "DD5", "2.0", "5.1", "7.1", "ATMOS",
    # Release types and versions
    "EXTENDED", "UNRATED", "DIRECTORS CUT", "DC", "REMASTERED",
    "THEATRICAL CUT", "FINAL CUT", "SPECIAL EDITION", "SE",
    # Language and subtitles
    "SUBBED", "DUBBED", "MULTI", "DUAL AUDIO", "ENG", "ENG SUBS", "ITA",
    "GERMAN", "FRENCH", "SPANISH", "KOREAN", "JAPANESE", "CHINESE",
    # HDR formats
    "HDR", "SDR", "DV", "HDR10", "HDR10+", "HLG", "DOLBY VISION",
    # Release groups and uploader tags
    "YIFY", "YTS", "RARBG", "SHiTSoNy", "SiNNERS", "ANOXMOUS", "AN0NYM0US",
    "HON3Y", "HIGHCODE", "DELTA", "JYK", "Z3R0C00", "BRSHNKV", "MZABI",
    "ETRG", "GANJAMAN", "CMRG", "INSPiRAL", "Tigole", "FGT",
    # Other
    "RESTORED", "COMPLETE", "DUOLOGY", "TRILOGY", "QUADRILOGY",
    "COLLECTION", "SERIES", "SEASON", "EPISODE", "S0", "E0",
    "READNFO", "NFO", "CAMRip", "WORKPRINT", "TELESYNC", "TELECINE",
    "SCREENER", "DVDSCR", "BDrip",
    "NF", "AMZN", "AMAZON", "HULU", "NETFLIX", "IMAX", "Criterion", "Rip",
    "UHD", "ULTRAHD", "HDCAM", "HDTS",
]

UNWANTED_TERMS: frozenset[str] = frozenset(term.upper() for term in _UNWANTED)

# Subtitle language codes recognised in front of ".srt" (without the dot).
LANGUAGE_CODES: frozenset[str] = frozenset({
    'en', 'es', 'fr', 'de', 'it', 'pt', 'ru', 'zh', 'ja', 'ko',
    'ar', 'nl', 'sv', 'no', 'da', 'fi', 'pl', 'tr', 'he', 'el',
    'cs', 'sk', 'hu', 'bg', 'ro', 'hr', 'sr', 'sl', 'uk', 'th',
    'vi', 'id', 'ms',
})

SUBTITLE_EXTENSION = ".srt"


def is_unwanted(token: str) -> bool:
    """Return True if *token* is in the unwanted vocabulary."""
    return token.upper() in UNWANTED_TERMS


def is_language_code(code: str) -> bool:
    """Check a subtitle language code, with or without its leading dot."""
    if code.startswith('.'):
        code = code[1:]
    return code.lower() in LANGUAGE_CODES
