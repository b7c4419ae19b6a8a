# gw2dat

Helpers for working with the contents of a Guild Wars 2 `.dat` archive.

## Modules

- `gw2dat.formats`: the known magic numbers (`FourCC`), file kinds
  (`FileType`, with `is_texture()` and `is_sound()`), language codes
  (`Language`), MFT flags (`CompressionFlag`, `MftEntryFlag`), the model
  vertex format bits (`VertexFormat`), and frozen dataclasses for the
  little-endian records `DatHeader`, `MftHeader`, `MftEntry`, `FileIdEntry`,
  `FileReference`, `AtexHeader`, `PfHeader`, `PfChunkHeader`,
  `ModelMaterialPermutations`, `ModelMaterialData` and
  `ModelTextureReference`. Each has a `SIZE` and a `from_bytes(data)`
  constructor that raises `ValueError` when `data` is too short.
- `gw2dat.categorize`: `categorize(file_type, data, base_id=0, file_data=None)`
  returns the category path of an entry as a tuple of strings (for example
  `("Textures", "Generic Textures", "256x128")`). String files need their
  whole contents in `file_data` so that the language can be read.
  `required_identification_size(data, file_type)` gives how many leading bytes
  are needed to identify an entry, `entry_name(base_id, entry_number)` its
  display name, and `is_bitmap_font_chunk(base_id)` tells whether a base id is
  one of the known bitmap font chunks.
- `gw2dat.hexview`: an offset / hex / text dump. `format_hex_dump(data)`
  returns the whole dump as text; `hex_lines(data, first_line=0,
  last_line=None)` yields `HexLine` records for a range of lines;
  `line_count(size)` and `filter_text_char(value)` are the building blocks.
- `gw2dat.channels`: hide red, green, blue or alpha in raw pixel data.
  `ChannelMask` holds the visible `Channel` flags and `toggle(channel,
  enabled)` reports whether it changed; `apply_channels(rgb, alpha, channels)`
  returns the new `(rgb, alpha)` pair.
- `gw2dat.bits`: `lowest_set_bit`, `num_set_bits` and `is_power_of_two`.

## Installation

```
pip install .
```

## Example

```python
from gw2dat.formats import AtexHeader, FileType
from gw2dat.categorize import categorize
from gw2dat.hexview import format_hex_dump

data = b"ATEXDXT5" + (256).to_bytes(2, "little") + (128).to_bytes(2, "little")
header = AtexHeader.from_bytes(data)
print(header.width, header.height)            # 256 128

print(categorize(FileType.ATEX, data, 1234))  # ('Textures', 'Generic Textures', '256x128')

print(format_hex_dump(data))
```

## What it does not do

The package does not open or read `.dat` archives itself: it has no archive
reader, no decompression, no file-type identification from raw bytes, and no
index storage. It also has no viewer window or command-line tool. You supply
the bytes and the identified `FileType`; the package decodes records, sorts
entries into categories and formats data for display.

## Running the tests

```
pip install .[test]
pytest
```