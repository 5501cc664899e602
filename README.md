# barcodegen

Barcode encoders in plain Python. The package has no third-party dependencies.

Supported symbologies:

- **1D:** Codabar, Code 128, Code 39, Code 93, EAN-8 and EAN-13
- **2D:** Data Matrix (ECC 200, square symbols from 10x10 to 144x144)

Each encoder returns a barcode object. The object is a grid of modules, one pixel per module:

- `width` and `height` give the grid size in modules.
- `bounds` gives `(0, 0, width, height)`.
- `at(x, y)` gives the RGBA colour of one module. It is the colour scheme's `foreground` for a bar or dark module and its `background` otherwise.
- `content` holds the encoded text.
- `metadata` holds a `Metadata(kind, dimensions)` value.

One-dimensional codes are `barcodegen.core.OneDCode` objects. They are one module high, and their bars are in the `bars` attribute as a `BitList`. Code 128, Code 39 and EAN codes also set `checksum`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

### EAN

```python
from barcodegen import ean

code = ean.encode("5901234123457")
row = "".join("1" if bit else "0" for bit in code.bars)
```

- Seven or twelve digits are completed with their check digit.
- Eight or thirteen digits must carry a correct check digit.

`ean.calc_check_num` computes a check digit on its own.

### Codabar

```python
from barcodegen import codabar

code = codabar.encode("A40156B")
```

The content must begin and end with one of the start/stop characters `A`, `B`, `C` or `D`. Between them it may hold only the characters `0-9 - $ : / . +`.

### Code 128

```python
from barcodegen import code128

code = code128.encode("HI345678H")
plain = code128.encode_without_checksum("HI345678H")
```

The optional `table` argument picks the code set:

- `"a"`, `"b"` or `"c"` forces that code set.
- The default, an empty string, chooses code sets automatically and switches between them as needed.

Content must be 1 to 80 characters long. The function characters are `code128.FNC1` to `code128.FNC4`, which are the characters `\u00f1` to `\u00f4`.

### Code 39 and Code 93

```python
from barcodegen import code39, code93

c39 = code39.encode("CODE39", include_checksum=True)
c93 = code93.encode("Hello", include_checksum=True, full_ascii_mode=True)
```

The two encoders take these options:

- `full_ascii_mode` maps any ASCII text onto the symbol's character set.
- In Code 39, `include_checksum` adds the modulo-43 check character.
- Code 93 always adds its C check character. `include_checksum` adds the K check character as well.

`code39.get_checksum` and `code93.get_checksum` compute check characters on their own.

### Data Matrix

```python
from barcodegen import datamatrix

code = datamatrix.encode("Hello, world")
```

The text is encoded in ASCII mode, with digit pairs packed into one codeword, and the smallest square symbol that fits is chosen. Some lower-level pieces are available on their own:

- `datamatrix.encode_text`
- `datamatrix.add_padding`
- `datamatrix.calc_ecc`
- `datamatrix.size_for`
- `datamatrix.CodeLayout`

### Colours

Every encoder takes an optional `color` argument, a `barcodegen.core.ColorScheme`. The default is `COLOR_SCHEME_16`, which draws black on white.

### Reed-Solomon

`barcodegen.reedsolomon` provides `GaloisField` and `ReedSolomonEncoder`. Any code that needs error-correction words can use them.

## Errors

Every encoder raises `barcodegen.core.EncodingError`, a subclass of `ValueError`, in these cases:

- The content cannot be represented in the symbology.
- The content is too long.
- A given check digit does not match.

## What this package does not do

- It encodes only; it does not read or decode barcodes.
- It writes no image files. Render a symbol by sampling `at(x, y)` with an imaging library of your choice.
- It has no encoders for Aztec, PDF417, QR Code or 2 of 5 codes.
- It has no command-line tool.