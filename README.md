# signaltx

signaltx reads a text file and turns it into a bit stream. It encodes the text
as UTF-8 or UTF-16 (little-endian, no byte-order mark). It splits every byte
into bits with the most significant bit first. It can then modulate the bits
onto a 1000 Hz carrier with amplitude-shift keying (ASK) or phase-shift keying
(PSK).

Fixed parameters:

- sample rate: 16000 Hz (`TextModel.SAMPLE_RATE`)
- samples per bit: 1000 (`TextModel.SAMPLES_PER_BIT`)

## Installation

```
pip install .
```

## Command line

```
signaltx INPUT [-e ENCODING] [-m MODULATION] [-s PATH]
```

- `INPUT`: the text file to load. It is read as UTF-8.
- `-e`, `--encoding`: `UTF-8` or `UTF-16`. The default is `UTF-8`.
- `-m`, `--modulation`: `ASK` or `PSK`. With no modulation given, no samples are produced.
- `-s`, `--save PATH`: writes the loaded text to `PATH`.

The command prints these lines in order:

1. the sample rate, as `Sample rate: 16000 Hz`;
2. `Encoded:`, followed by the bits as a string of `0` and `1`;
3. when a modulation is given, `Modulated:`, followed by the samples to two
   decimal places, separated by spaces.

If the input cannot be read or the save path cannot be written, the command
prints `Error: Cannot open file: ...` to standard error and exits with status 1.
It does not check encoding and modulation names. An unknown name produces
empty output for that step.

## Library use

```python
from signaltx.model import TextModel
from signaltx.waveview import EncodedView

model = TextModel()
model.load("message.txt")
bits = model.encode("UTF-8")
samples = model.modulate("PSK")

view = EncodedView(model)
view.reset_view()
print(view.points, view.x_range)
```

`TextModel` holds the text in `raw`, the bits in `encoded` and the samples in
`modulated`.

- `load` and `save` read and write the text as UTF-8.
- `encode` accepts `"UTF-8"` or `"UTF-16"`. `modulate` accepts `"ASK"` or
  `"PSK"`. Neither is case sensitive.
- Both return the new list and store it on the model. Any other name gives an
  empty list.

`EncodedView` computes a rectangular waveform for a window of at most 100 of
the encoded bits. Each bit becomes two `(time, value)` points in `points`, and
the window's time span is kept in `x_range`.

- `set_view_range(start_idx, display_count)` sets the window. The window is
  kept within the data and holds between 10 and 100 bits.
- `wheel(delta_y, ctrl)` scrolls the window, or zooms it when `ctrl` is true.
  It returns `True` when there are bits to act on.
- `reset_view()` returns to the start.
- `update()` rebuilds the points for the current window.

The helpers `format_bits` and `format_samples` in `signaltx.cli` format the bits
and samples as the command prints them.

## What it does not do

- There is no graphical display. `EncodedView` only computes the waveform
  points and the time range; drawing them is left to the caller.
- Bits and samples are only printed or returned. Nothing writes them to a file.
  `save` writes the text only.

## Running the tests

```
pip install .[test]
pytest
```