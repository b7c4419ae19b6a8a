"""Sorting of archive entries into a category tree while scanning."""

from __future__ import annotations

import struct
from typing import Optional, Tuple

from .formats import FileType, Language

Category = Tuple[str, ...]

# Entries that belong to the bitmap font (AFNT) in file number 154945.
_BITMAP_FONT_CHUNKS = frozenset(
    [
        154824, 154825, 154826, 154827, 154828, 154829,
        *range(154842, 154847),
        *range(154876, 154888),
        *range(154889, 154897),
        *range(154898, 154943),
        154944,
        *range(439864, 439888),
        *range(439896, 440000),
        *range(459802, 459810),
        459926, 459935, 459981,
        *range(858064, 858136),
    ]
)

_TEXTURE_SUBCATEGORIES = {
    FileType.ATEX: "Generic Textures",
    FileType.ATTX: "Terrain Textures",
    FileType.ATEC: "ATEC",
    FileType.ATEP: "Map Textures",
    FileType.ATEU: "UI Textures",
    FileType.ATET: "ATET",
    FileType.CTEX: "CTEX",
    FileType.DDS: "DDS",
    FileType.JPEG: "JPEG",
    FileType.WEBP: "WebP",
    FileType.PNG: "PNG",
}

_ATEX_FAMILY = frozenset(
    {
        FileType.ATEX,
        FileType.ATTX,
        FileType.ATEC,
        FileType.ATEP,
        FileType.ATEU,
        FileType.ATET,
    }
)

_SOUND_SUBCATEGORIES = {
    FileType.SOUND: None,
    FileType.MP3: "MP3",
    FileType.OGG: "Ogg",
    FileType.ASND_MP3: "asndMP3",
    FileType.ASND_OGG: "asndOgg",
    FileType.PACKED_MP3: "PackedMP3",
    FileType.PACKED_OGG: "PackedOgg",
}

_LANGUAGE_NAMES = {
    Language.ENGLISH: "English",
    Language.KOREAN: "Korean",
    Language.FRENCH: "French",
    Language.GERMAN: "German",
    Language.SPANISH: "Spanish",
    Language.CHINESE: "Chinese",
}

_SIMPLE_CATEGORIES = {
    FileType.BINARY: "Binaries",
    FileType.EXE: "Binaries",
    FileType.DLL: "Binaries",
    FileType.MANIFEST: "Manifests",
    FileType.TEXT: "Text",
    FileType.UTF8: "Text",
    FileType.TEXT_PACK_MANIFEST: "TextPack Manifests",
    FileType.TEXT_PACK_VARIANT: "TextPack Variant",
    FileType.TEXT_PACK_VOICES: "TextPack Voices",
    FileType.BANK: "Soundbank",
    FileType.BANK_INDEX: "Soundbank Index",
    FileType.AUDIO_SCRIPT: "Audio Scripts",
    FileType.MODEL_COLLISION_MANIFEST: "Model Collision Manifest",
    FileType.DEPENDENCY_TABLE: "Dependency Tables",
    FileType.EULA: "EULA",
    FileType.CINEMATIC: "Cinematics",
    FileType.MAP_COLLISION: "Map Collision",
    FileType.GAME_CONTENT: "Game Content",
    FileType.GAME_CONTENT_PORTAL_MANIFEST: "Game Content Portal Manifest",
    FileType.MAP_PARAM: "Map",
    FileType.MAP_SHADOW: "Map Shadow",
    FileType.MAP_METADATA: "Map Metadata",
    FileType.PAGED_IMAGE_TABLE: "Paged Image Table",
    FileType.MATERIAL: "Materials",
    FileType.COMPOSITE: "Composite Data",
    FileType.ANIM_SEQUENCES: "Animation Sequences",
    FileType.EMOTE_ANIMATION: "Emote Animations",
    FileType.FONT_FILE: "Font",
    FileType.BITMAP_FONT_FILE: "Bitmap Font",
    FileType.BINK2_VIDEO: "Bink Videos",
    FileType.SHADER_CACHE: "Shader Cache",
    FileType.CONFIG: "Configuration",
}


def required_identification_size(data: bytes, file_type: FileType) -> int:
    """Number of leading bytes needed to identify an entry of ``file_type``."""
    if file_type == FileType.BINARY:
        if len(data) >= 0x40:
            (pe_offset,) = struct.unpack_from("<I", data, 0x3C)
            return pe_offset + 0x18
        return 0x140
    if file_type == FileType.SOUND:
        return 0x80
    return 0x20


def is_bitmap_font_chunk(base_id: int) -> bool:
    """True if ``base_id`` is one of the known bitmap font chunk files."""
    return base_id in _BITMAP_FONT_CHUNKS


def entry_name(base_id: int, entry_number: int) -> str:
    """Display name of an index entry; entries without a base id use their MFT number."""
    if base_id == 0:
        return f"ID-less_{entry_number}"
    return str(base_id)


def _texture_dimensions(file_type: FileType, data: bytes) -> Optional[str]:
    if file_type in _ATEX_FAMILY:
        if len(data) < 12:
            raise ValueError("texture header needs at least 12 bytes")
        width, height = struct.unpack_from("<HH", data, 8)
        return f"{width}x{height}"
    if file_type == FileType.DDS and len(data) >= 20:
        height, width = struct.unpack_from("<II", data, 12)
        return f"{width}x{height}"
    return None


def _string_language(file_data: Optional[bytes]) -> Category:
    if file_data is None or len(file_data) < 2:
        raise ValueError("string file contents of at least 2 bytes are required")
    language = file_data[-2]
    try:
        return (_LANGUAGE_NAMES[Language(language)],)
    except ValueError:
        return ("Unknown", str(language))


def categorize(
    file_type: FileType,
    data: bytes,
    base_id: int = 0,
    file_data: Optional[bytes] = None,
) -> Category:
    """Category path for an entry.

    ``data`` holds the leading bytes read for identification, ``base_id`` the
    entry's base id and ``file_data`` the whole entry, needed for string files.
    """
    file_type = FileType(file_type)

    if file_type in _TEXTURE_SUBCATEGORIES:
        path: Category = ("Textures", _TEXTURE_SUBCATEGORIES[file_type])
        dimensions = _texture_dimensions(file_type, data)
        return path + (dimensions,) if dimensions is not None else path

    if file_type in _SOUND_SUBCATEGORIES:
        sub = _SOUND_SUBCATEGORIES[file_type]
        return ("Sounds", sub) if sub is not None else ("Sounds",)

    if file_type == FileType.STRING_FILE:
        return ("Strings",) + _string_language(file_data)

    if file_type == FileType.MODEL:
        return ("Models", f"{base_id // 10000}xxxx")

    if file_type in (FileType.PF, FileType.ARAP):
        if file_type == FileType.PF and len(data) >= 12:
            return ("Misc", bytes(data[8:12]).decode("latin-1"))
        return ("Misc",)

    if file_type in _SIMPLE_CATEGORIES:
        return (_SIMPLE_CATEGORIES[file_type],)

    if is_bitmap_font_chunk(base_id):
        return ("Bitmap Font", "Chunk")
    return ("Unknown",)