"""Constants and fixed-layout records used by the archive and its contents."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import ClassVar, Tuple


class Language(IntEnum):
    """Language codes stored near the end of string files."""

    ENGLISH = 0
    KOREAN = 1
    FRENCH = 2
    GERMAN = 3
    SPANISH = 4
    CHINESE = 5


class FourCC(IntEnum):
    """Little-endian magic numbers that identify files in the archive."""

    # Offset 0
    ATEX = 0x58455441
    ATTX = 0x58545441
    ATEC = 0x43455441
    ATEP = 0x50455441
    ATEU = 0x55455441
    ATET = 0x54455441
    DCX3 = 0x58434433
    DXT = 0x00545844
    DDS = 0x20534444
    strs = 0x73727473
    asnd = 0x646E7361
    RIFF = 0x46464952
    TTF = 0x00000100
    OggS = 0x5367674F
    ARAP = 0x50415241
    CTEX = 0x58455443

    # Texture codecs
    DXT1 = 0x31545844
    DXT2 = 0x32545844
    DXT3 = 0x33545844
    DXT4 = 0x34545844
    DXT5 = 0x35545844
    DXTN = 0x4E545844
    DXTL = 0x4C545844
    DXTA = 0x41545844
    R32F = 0x00000072

    # RIFF
    WEBP = 0x50424557

    # PF
    ARMF = 0x464D5241
    ASND = 0x444E5341
    ABNK = 0x4B4E4241
    ABIX = 0x58494241
    AMSP = 0x50534D41
    CDHS = 0x53484443
    CINP = 0x504E4943
    cntc = 0x63746E63
    MODL = 0x4C444F4D
    GEOM = 0x4D4F4547
    DEPS = 0x53504544
    EULA = 0x616C7565
    hvkC = 0x436B7668
    locl = 0x6C636F6C
    mapc = 0x6370616D
    mpsd = 0x6473706D
    PIMG = 0x474D4950
    AMAT = 0x54414D41
    anic = 0x63696E61
    emoc = 0x636F6D65
    prlt = 0x746C7270
    cmpc = 0x63706D63
    txtm = 0x6D747874
    txtV = 0x56747874
    txtv = 0x76747874
    PNG = 0x474E5089
    cmaC = 0x43616D63
    mMet = 0x74654D6D
    AFNT = 0x544E4641

    # Shorter signatures
    MZ = 0x5A4D
    PF = 0x4650
    MP3 = 0xFBFF
    JPEG = 0xFFD8FF
    ID3 = 0x334449
    BINK2 = 0x32424B
    UTF8 = 0xBFBBEF


class FileType(IntEnum):
    """Known kinds of file found in the archive."""

    UNKNOWN = 0

    TEXTURE_START = 1
    ATEX = 2
    ATTX = 3
    ATEC = 4
    ATEP = 5
    ATEU = 6
    ATET = 7
    CTEX = 8
    DDS = 9
    JPEG = 10
    WEBP = 11
    PNG = 12
    TEXTURE_END = 13

    SOUND_START = 14
    SOUND = 15
    ASND_MP3 = 16
    ASND_OGG = 17
    PACKED_MP3 = 18
    PACKED_OGG = 19
    OGG = 20
    MP3 = 21
    SOUND_END = 22

    RIFF = 23

    PF = 24
    MANIFEST = 25
    TEXT_PACK_MANIFEST = 26
    TEXT_PACK_VARIANT = 27
    TEXT_PACK_VOICES = 28
    BANK = 29
    BANK_INDEX = 30
    MODEL = 31
    MODEL_COLLISION_MANIFEST = 32
    DEPENDENCY_TABLE = 33
    EULA = 34
    GAME_CONTENT = 35
    GAME_CONTENT_PORTAL_MANIFEST = 36
    MAP_COLLISION = 37
    MAP_PARAM = 38
    MAP_SHADOW = 39
    MAP_METADATA = 40
    PAGED_IMAGE_TABLE = 41
    MATERIAL = 42
    COMPOSITE = 43
    CINEMATIC = 44
    ANIM_SEQUENCES = 45
    EMOTE_ANIMATION = 46
    AUDIO_SCRIPT = 47
    SHADER_CACHE = 48
    CONFIG = 49

    BINARY = 50
    DLL = 51
    EXE = 52

    STRING_FILE = 53
    FONT_FILE = 54
    BITMAP_FONT_FILE = 55
    BINK2_VIDEO = 56
    ARAP = 57
    UTF8 = 58
    TEXT = 59

    def is_texture(self) -> bool:
        """True for the image types lying between the texture markers."""
        return FileType.TEXTURE_START < self < FileType.TEXTURE_END

    def is_sound(self) -> bool:
        """True for the audio types lying between the sound markers."""
        return FileType.SOUND_START < self < FileType.SOUND_END


class CompressionFlag(IntEnum):
    """Compression flag of an MFT entry."""

    UNCOMPRESSED = 0
    COMPRESSED = 8


class MftEntryFlag(IntFlag):
    """Usage flags of an MFT entry."""

    NONE = 0
    IN_USE = 1


class VertexFormat(IntFlag):
    """Fields of the flexible vertex format used by models."""

    POSITION = 0x00000001
    WEIGHTS = 0x00000002
    GROUP = 0x00000004
    NORMAL = 0x00000008
    COLOR = 0x00000010
    TANGENT = 0x00000020
    BITANGENT = 0x00000040
    TANGENT_FRAME = 0x00000080
    UV32_MASK = 0x0000FF00
    UV16_MASK = 0x00FF0000
    UNKNOWN1 = 0x01000000
    UNKNOWN2 = 0x02000000
    UNKNOWN3 = 0x04000000
    UNKNOWN4 = 0x08000000
    POSITION_COMPRESSED = 0x10000000
    UNKNOWN5 = 0x20000000


class _Record:
    """Base for packed little-endian records."""

    _LAYOUT: ClassVar[struct.Struct]
    SIZE: ClassVar[int]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.SIZE = cls._LAYOUT.size

    @classmethod
    def _unpack(cls, data):
        if len(data) < cls._LAYOUT.size:
            raise ValueError(
                f"{cls.__name__} needs {cls._LAYOUT.size} bytes, got {len(data)}"
            )
        return cls(*cls._convert(cls._LAYOUT.unpack_from(data)))

    @classmethod
    def _convert(cls, values: tuple) -> tuple:
        return values


def _fourcc_int(code: bytes) -> int:
    return int.from_bytes(code, "little")


@dataclass(frozen=True)
class DatHeader(_Record):
    """Header at the start of the archive."""

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<B3sIIIIIQII")

    version: int
    identifier: bytes
    header_size: int
    unknown_field1: int
    chunk_size: int
    crc: int
    unknown_field2: int
    mft_offset: int
    mft_size: int
    flags: int

    @classmethod
    def from_bytes(cls, data):
        """Decode a header from the start of ``data``."""
        return cls._unpack(data)


@dataclass(frozen=True)
class MftHeader(_Record):
    """Header of the master file table (entry 0)."""

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<4sQIQ")

    identifier: bytes
    unknown_field1: int
    num_entries: int
    unknown_field2: int

    @classmethod
    def from_bytes(cls, data):
        """Decode a header from the start of ``data``."""
        return cls._unpack(data)


@dataclass(frozen=True)
class MftEntry(_Record):
    """One entry of the master file table."""

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<QIHHII")

    offset: int
    size: int
    compression_flag: int
    entry_flags: int
    counter: int
    crc: int

    @classmethod
    def from_bytes(cls, data):
        """Decode an entry from the start of ``data``."""
        return cls._unpack(data)

    @property
    def is_compressed(self) -> bool:
        return bool(self.compression_flag & CompressionFlag.COMPRESSED)

    @property
    def in_use(self) -> bool:
        return bool(self.entry_flags & MftEntryFlag.IN_USE)


@dataclass(frozen=True)
class FileIdEntry(_Record):
    """Mapping of a file id to its MFT entry index."""

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<II")

    file_id: int
    mft_entry_index: int

    @classmethod
    def from_bytes(cls, data):
        """Decode an entry from the start of ``data``."""
        return cls._unpack(data)


@dataclass(frozen=True)
class FileReference(_Record):
    """Reference to another file, stored as three 16-bit parts."""

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<3H")

    parts: Tuple[int, int, int]

    @classmethod
    def from_bytes(cls, data):
        """Decode a reference from the start of ``data``."""
        return cls._unpack(data)

    @classmethod
    def _convert(cls, values: tuple) -> tuple:
        return (tuple(values),)


@dataclass(frozen=True)
class AtexHeader(_Record):
    """Header of an ATEX-family texture."""

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<4s4sHH")

    identifier: bytes
    format: bytes
    width: int
    height: int

    @classmethod
    def from_bytes(cls, data):
        """Decode a header from the start of ``data``."""
        return cls._unpack(data)

    @property
    def identifier_integer(self) -> int:
        return _fourcc_int(self.identifier)

    @property
    def format_integer(self) -> int:
        return _fourcc_int(self.format)


@dataclass(frozen=True)
class PfHeader(_Record):
    """Header of a PF container file."""

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<2sHHH4s")

    identifier: bytes
    unknown_field1: int
    unknown_field2: int
    pk_file_version: int
    type: bytes

    @classmethod
    def from_bytes(cls, data):
        """Decode a header from the start of ``data``."""
        return cls._unpack(data)

    @property
    def type_integer(self) -> int:
        return _fourcc_int(self.type)


@dataclass(frozen=True)
class PfChunkHeader(_Record):
    """Header of a chunk inside a PF file."""

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<4sIHHI")

    chunk_type: bytes
    chunk_data_size: int
    chunk_version: int
    chunk_header_size: int
    offset_table_offset: int

    @classmethod
    def from_bytes(cls, data):
        """Decode a chunk header from the start of ``data``."""
        return cls._unpack(data)

    @property
    def chunk_type_integer(self) -> int:
        return _fourcc_int(self.chunk_type)


@dataclass(frozen=True)
class ModelMaterialPermutations(_Record):
    """Material permutation record of a model chunk."""

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<QIi")

    token: int
    material_count: int
    materials_offset: int

    @classmethod
    def from_bytes(cls, data):
        """Decode a record from the start of ``data``."""
        return cls._unpack(data)


@dataclass(frozen=True)
class ModelMaterialData(_Record):
    """Material description record of a model chunk."""

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<QIiIIIiIiIiIiIiB")

    token: int
    material_id: int
    material_file_offset: int
    material_flags: int
    sort_order: int
    texture_count: int
    textures_offset: int
    constants_count: int
    constants_offset: int
    mat_const_links_count: int
    mat_const_links_offset: int
    uv_trans_links_count: int
    uv_trans_links_offset: int
    tex_transforms4_count: int
    tex_transforms4_offset: int
    tex_coord_count: int

    @classmethod
    def from_bytes(cls, data):
        """Decode a record from the start of ``data``."""
        return cls._unpack(data)


@dataclass(frozen=True)
class ModelTextureReference(_Record):
    """Texture reference record of a model chunk."""

    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<iIQQIB")

    offset_to_file_reference: int
    texture_flags: int
    token: int
    blit_id: int
    uv_anim_id: int
    uv_ps_input_index: int

    @classmethod
    def from_bytes(cls, data):
        """Decode a record from the start of ``data``."""
        return cls._unpack(data)