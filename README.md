# stone_analysis

A command-line tool and library for working with mono, 16-bit, 48 kHz PCM WAV
files. It does three things:

- **Analyse**: averages the magnitude spectrum of the signal over blocks of 2048
  samples and prints the N strongest frequencies.
- **Cypher / decypher**: hides a short text message in the band above 20 kHz,
  one byte per block of 2048 samples, and reads it back.
- **Visualize**: writes a binary PPM (P6) image of either the amplitude envelope
  or a heat-coloured spectrogram.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The tool takes exactly one mode flag, followed by exactly that mode's
positional arguments:

```
stone_analysis -a IN_FILE N                    # top N frequencies
stone_analysis -c IN_FILE OUT_FILE MESSAGE     # hide MESSAGE in a copy of IN_FILE
stone_analysis -d IN_FILE                      # print the hidden message
stone_analysis -v IN_FILE OUT_FILE MODE        # MODE is amplitude or frequency
stone_analysis -h                              # help
```

Long forms are accepted as well: `--analyze`, `--cypher`, `--decypher`,
`--visualize`, `--help`.

Examples:

```
stone_analysis --analyze song.wav 5
stone_analysis --cypher song.wav hidden.wav "hello"
stone_analysis --decypher hidden.wav
stone_analysis --visualize song.wav spectrum.ppm frequency
```

The analysis prints `Top N frequencies:` followed by one line per frequency,
for example `440.0 Hz`, strongest first.

Lower-case ASCII letters are stored in upper case, so `hello` decodes as
`HELLO`. The encoded file is padded with silence when the input is too short to
hold one block per character plus one block for the length.

With no arguments, an unknown option, no mode or several modes, or the wrong
number of positional arguments, the tool prints a message prefixed with `err`
to standard error and exits with status 84. The same happens when a file cannot
be read or written. An unknown visualisation mode only prints a notice to
standard error.

## Input format

Only RIFF/WAVE files whose samples start right after a 44-byte header are
accepted: one channel, 48000 Hz, 16-bit samples. Anything else raises
`UnsupportedSampleFormat` or `InvalidWavHeader`.

## Library use

```python
from stone_analysis.wav import read_samples
from stone_analysis.analysis import analyze_spectrogram

samples = read_samples("song.wav")
for result in analyze_spectrogram(samples, 3):
    print(f"{result.hz:.1f} Hz  {result.magnitude:.2f}")
```

Other entry points:

- `stone_analysis.wav.read_wav(path)` returns a `WavHeader` and the samples
  as floats in [-1, 1).
- `stone_analysis.analysis.run(path, n)` prints and returns the top `n`
  `FrequencyResult` values.
- `stone_analysis.encryption.run_encryption(input_file, output_file, message)`
- `stone_analysis.decryption.run_decryption(input_file)` prints and returns
  the hidden message; `unmask_message(samples)` works on samples directly.
- `stone_analysis.visualizer.run(path, mode, output_path)`
- `stone_analysis.fourier.dft(samples)` and `idft(spectrum)`
- `stone_analysis.main.main(argv)` runs the command line and returns its exit
  status.

Errors are raised as subclasses of `AudioError`, `StegoError` and `CliError`
from `stone_analysis.errors`.

## Limitations

- Only mono 16-bit 48 kHz PCM is read; there is no resampling or channel
  mixing.
- The message length is read from a band that ends at the Nyquist bin, so a
  message longer than 170 bytes is written but cannot be read back correctly.
  The encoder does not check for this.
- Images are written only as binary PPM; there is no on-screen or ASCII
  display, although the help text mentions one. The visualisation modes are
  `amplitude` and `frequency`.