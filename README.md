# maskrecover

maskrecover rebuilds an original image from a distorted one. The distorted image was made by
applying a chain of bitwise operations to the original. The tool tries each candidate
operation in turn. It keeps a candidate only when the candidate agrees with a masking record
taken after that step.

## Input files

A working directory holds these files:

- `I_D.bmp`: the final, distorted image.
- `I_M.bmp`: the image used as the second operand of the bitwise operations.
- `M.bmp`: the mask image.
- `M1.txt` … `MN.txt`: the masking records, one file per step.

Any image format that Pillow can open is accepted. Every image is converted to RGB.

### Masking files

The first integer in a masking file is the seed, which is a byte offset into the transformed
image. The integers after the seed are read as `R G B` triples.

- Reading stops at the first token that is not an integer.
- An incomplete triple at the end is dropped.
- A file that contains no integer at all raises `ValueError`.

## How recovery works

The steps are numbered `i = 0 … N-1`, and step `i` uses the record `M{N-i}.txt`.

At each step, XOR, OR and AND between the current pixels and `I_M.bmp` are tried in that order.

A candidate passes when `mask[k] + candidate[seed + k]` equals the recorded value for every
value in the record, where `mask` is the pixel data of `M.bmp`. A candidate that passes
becomes the current pixels straight away. The operations after it in the same step then work
on those new pixels.

When all steps are done, the result has the width and height of `I_D.bmp`.

A `ValueError` is raised in either of these cases:

- the masked region falls outside the transformed data;
- the mask is smaller than the region.

## Installation

```
pip install .
```

## Command line

```
maskrecover [DIRECTORY] [--steps N] [--output PATH]
```

| Argument | Default | Meaning |
| --- | --- | --- |
| `DIRECTORY` | current directory | folder that holds the input files |
| `--steps` | `6` | number of transformations applied to the original |
| `--output` | `DIRECTORY/IO.bmp` | where the recovered image is written, always in BMP format |

The command returns 0 on success. If a file cannot be read or written, or a masking record
does not fit the images, it prints an error to standard error and returns 1.

## Library use

```python
from maskrecover.bitops import xor_bytes, or_bytes, and_bytes, rotate_left, rotate_right
from maskrecover.pixels import PixelImage, load_pixels, export_image
from maskrecover.masking import MaskingData, load_seed_masking, verify_transformation
from maskrecover.cli import reconstruct

image = load_pixels("I_D.bmp")          # PixelImage: width, height, packed RGB bytes
rotated = rotate_left(image.data, 3)    # rotate every byte left by 3 bits
record = load_seed_masking("M1.txt")    # MaskingData: seed, values, n_pixels
recovered = reconstruct(".", 6)         # PixelImage of the recovered image
export_image(recovered, "IO.bmp")       # written as BMP
```

### `maskrecover.bitops`

- `xor_bytes`, `or_bytes` and `and_bytes` combine two buffers of equal length, byte by byte.
  Buffers of different lengths raise `ValueError`.
- `rotate_left` and `rotate_right` rotate every byte by `n` bits, where `0 <= n <= 8`.
  Any other `n` raises `ValueError`.

### `maskrecover.pixels`

`PixelImage` is a frozen dataclass. Its data must be exactly `width * height * 3` bytes.

### `maskrecover.pixels.load_pixels` and `export_image`

If an image cannot be loaded or saved, these functions raise `OSError`.

## What it does not do

Recovery tries only XOR, OR and AND. The bit rotations are available as functions, but
`reconstruct` never tries them. An image that was distorted with rotations is therefore not
recovered by the command.

## Running the tests

```
pip install .[test]
pytest
```