# bl1tool

`bl1tool` turns a raw binary into a BL1 image that the S5PV210 boot ROM
accepts from an SD card or NAND flash. It can also check an existing image.

During the BL0 stage, the boot ROM copies up to 16 KiB from the boot device
into internal RAM. It then checks a 16-byte header before it runs the code.
The header holds four little-endian 32-bit words:

| Offset | Field                                                    |
|--------|----------------------------------------------------------|
| 0x0    | image size, header included, rounded up to 512 bytes     |
| 0x4    | 0                                                        |
| 0x8    | checksum: sum of all payload bytes, modulo 2**32         |
| 0xC    | 0                                                        |

The payload is capped at 16 KiB minus 16 bytes (`MAX_PAYLOAD`). Anything
beyond that is dropped. The output is zero-padded to a whole number of
512-byte blocks.

## Installation

```
pip install .
```

## Command line

```
bl1tool led.bin bl1.bin
```

The first argument is the raw binary, for example the output of
`objcopy -O binary`. The second is the image to write. On success the tool
prints:

```
BL1 image generated successfully: bl1.bin
```

It exits with status 1 in these cases:

- the number of arguments is not two: a usage line is printed;
- the source cannot be read (`source file open error: ...` on standard error);
- the destination cannot be written (`destination file open error: ...` on
  standard error).

## Library

```python
from bl1tool.image import build_image, verify_image, Bl1Header

with open("led.bin", "rb") as f:
    image = build_image(f.read())

header = Bl1Header.unpack(image)
print(header.size, hex(header.checksum))

verify_image(image)  # raises ImageError if the image is malformed
```

`bl1tool.image` provides:

- `build_image(source)` returns the complete image bytes for a raw binary.
- `verify_image(image)` checks that the declared size is block aligned, lies
  between 16 bytes and 16 KiB, is covered by the data, and that the checksum
  matches the payload. It returns the `Bl1Header` or raises `ImageError`.
- `Bl1Header(size, checksum)` with `pack()`, which returns the 16 header
  bytes, and `Bl1Header.unpack(data)`, which reads them back and raises
  `ImageError` if fewer than 16 bytes are given or a reserved word is not zero.
- `checksum(payload)` returns the byte sum wrapped to 32 bits.
- `block_aligned_size(length)` rounds a length up to a multiple of 512 and
  raises `ValueError` for a negative length.
- `ImageError`, a subclass of `ValueError`.
- The constants `IMAGE_SIZE`, `HEADER_SIZE`, `BLOCK_SIZE` and `MAX_PAYLOAD`.

`bl1tool.cli.convert_file(source, destination)` reads a binary from a path,
writes its image to another path and returns the header. Errors opening
either file are raised as `OSError`.

## What it does not do

`bl1tool` only produces and checks image files. It does not write the image
to an SD card or flash device, and it does not compile or link the binary
that goes into the image.

## Running the tests

```
pip install .[test]
pytest
```