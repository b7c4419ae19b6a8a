import struct

import pytest

from gw2dat.categorize import (
    categorize,
    entry_name,
    is_bitmap_font_chunk,
    required_identification_size,
)
from gw2dat.formats import FileType, Language


def _atex(width, height, magic=b"ATEX"):
    return magic + b"DXT5" + struct.pack("<HH", width, height) + bytes(20)


def _dds(width, height):
    return b"DDS " + struct.pack("<IIII", 124, 0x1007, height, width) + bytes(12)


# required_identification_size

def test_binary_with_pe_offset_uses_header_value():
    data = bytearray(0x40)
    struct.pack_into("<I", data, 0x3C, 0x100)
    assert required_identification_size(bytes(data), FileType.BINARY) == 0x100 + 0x18


def test_binary_short_data_default():
    assert required_identification_size(b"MZ" + bytes(10), FileType.BINARY) == 0x140


def test_sound_requires_128_bytes():
    assert required_identification_size(bytes(32), FileType.SOUND) == 0x80


@pytest.mark.parametrize("file_type", [FileType.ATEX, FileType.UNKNOWN, FileType.PF])
def test_other_types_require_32_bytes(file_type):
    assert required_identification_size(bytes(32), file_type) == 0x20


# is_bitmap_font_chunk

@pytest.mark.parametrize("base_id", [154824, 154944, 439864, 439999, 459926, 459981, 858064, 858135])
def test_known_bitmap_font_chunks(base_id):
    assert is_bitmap_font_chunk(base_id) is True


@pytest.mark.parametrize("base_id", [0, 154830, 154888, 154897, 154943, 154945, 439888, 459810, 858136])
def test_not_bitmap_font_chunks(base_id):
    assert is_bitmap_font_chunk(base_id) is False


# entry_name

def test_entry_name_uses_base_id():
    assert entry_name(1234, 99) == "1234"


def test_entry_name_without_base_id():
    assert entry_name(0, 42) == "ID-less_42"


# categorize: textures

@pytest.mark.parametrize(
    "file_type, magic, sub",
    [
        (FileType.ATEX, b"ATEX", "Generic Textures"),
        (FileType.ATTX, b"ATTX", "Terrain Textures"),
        (FileType.ATEC, b"ATEC", "ATEC"),
        (FileType.ATEP, b"ATEP", "Map Textures"),
        (FileType.ATEU, b"ATEU", "UI Textures"),
        (FileType.ATET, b"ATET", "ATET"),
    ],
)
def test_atex_family_with_dimensions(file_type, magic, sub):
    result = categorize(file_type, _atex(256, 128, magic))
    assert result == ("Textures", sub, "256x128")


def test_dds_dimensions_width_then_height():
    assert categorize(FileType.DDS, _dds(64, 32)) == ("Textures", "DDS", "64x32")


def test_short_dds_has_no_dimensions():
    assert categorize(FileType.DDS, b"DDS " + bytes(8)) == ("Textures", "DDS")


@pytest.mark.parametrize(
    "file_type, sub",
    [
        (FileType.CTEX, "CTEX"),
        (FileType.JPEG, "JPEG"),
        (FileType.WEBP, "WebP"),
        (FileType.PNG, "PNG"),
    ],
)
def test_other_textures(file_type, sub):
    assert categorize(file_type, bytes(32)) == ("Textures", sub)


def test_short_atex_raises():
    with pytest.raises(ValueError):
        categorize(FileType.ATEX, b"ATEX")


def test_every_texture_type_goes_to_textures():
    for file_type in FileType:
        if file_type.is_texture():
            assert categorize(file_type, _atex(4, 4))[0] == "Textures"


# categorize: sounds

@pytest.mark.parametrize(
    "file_type, expected",
    [
        (FileType.SOUND, ("Sounds",)),
        (FileType.MP3, ("Sounds", "MP3")),
        (FileType.OGG, ("Sounds", "Ogg")),
        (FileType.ASND_MP3, ("Sounds", "asndMP3")),
        (FileType.ASND_OGG, ("Sounds", "asndOgg")),
        (FileType.PACKED_MP3, ("Sounds", "PackedMP3")),
        (FileType.PACKED_OGG, ("Sounds", "PackedOgg")),
    ],
)
def test_sounds(file_type, expected):
    assert categorize(file_type, bytes(32)) == expected


# categorize: strings

@pytest.mark.parametrize(
    "language, name",
    [
        (Language.ENGLISH, "English"),
        (Language.KOREAN, "Korean"),
        (Language.FRENCH, "French"),
        (Language.GERMAN, "German"),
        (Language.SPANISH, "Spanish"),
        (Language.CHINESE, "Chinese"),
    ],
)
def test_string_file_language(language, name):
    contents = b"strs" + bytes(20) + bytes([language, 0])
    assert categorize(FileType.STRING_FILE, contents[:32], file_data=contents) == ("Strings", name)


def test_string_file_unknown_language():
    contents = b"strs" + bytes(20) + bytes([9, 0])
    assert categorize(FileType.STRING_FILE, contents, file_data=contents) == ("Strings", "Unknown", "9")


def test_string_file_without_contents_raises():
    with pytest.raises(ValueError):
        categorize(FileType.STRING_FILE, b"strs")


# categorize: models, misc and simple categories

def test_model_grouped_by_ten_thousands():
    assert categorize(FileType.MODEL, bytes(32), base_id=123456) == ("Models", "12xxxx")


def test_pf_uses_type_tag():
    data = b"PF" + struct.pack("<HHH", 1, 0, 12) + b"ABCD" + bytes(20)
    assert categorize(FileType.PF, data) == ("Misc", "ABCD")


def test_short_pf_is_misc_only():
    assert categorize(FileType.PF, b"PF" + bytes(4)) == ("Misc",)


def test_arap_is_misc():
    assert categorize(FileType.ARAP, b"ARAP" + bytes(28)) == ("Misc",)


@pytest.mark.parametrize(
    "file_type, name",
    [
        (FileType.BINARY, "Binaries"),
        (FileType.EXE, "Binaries"),
        (FileType.DLL, "Binaries"),
        (FileType.MANIFEST, "Manifests"),
        (FileType.TEXT, "Text"),
        (FileType.UTF8, "Text"),
        (FileType.TEXT_PACK_MANIFEST, "TextPack Manifests"),
        (FileType.BANK, "Soundbank"),
        (FileType.BANK_INDEX, "Soundbank Index"),
        (FileType.MAP_PARAM, "Map"),
        (FileType.MATERIAL, "Materials"),
        (FileType.BITMAP_FONT_FILE, "Bitmap Font"),
        (FileType.BINK2_VIDEO, "Bink Videos"),
        (FileType.CONFIG, "Configuration"),
    ],
)
def test_simple_categories(file_type, name):
    assert categorize(file_type, bytes(32)) == (name,)


# categorize: fallback

def test_unknown_bitmap_font_chunk():
    assert categorize(FileType.UNKNOWN, bytes(32), base_id=154824) == ("Bitmap Font", "Chunk")


def test_unknown_fallback():
    assert categorize(FileType.UNKNOWN, bytes(32), base_id=1) == ("Unknown",)


def test_riff_falls_back_to_unknown():
    assert categorize(FileType.RIFF, b"RIFF" + bytes(28), base_id=5) == ("Unknown",)


def test_every_type_yields_nonempty_string_path():
    for file_type in FileType:
        contents = _atex(8, 8)
        path = categorize(file_type, contents, base_id=10, file_data=contents)
        assert len(path) >= 1
        assert all(isinstance(part, str) and part for part in path)