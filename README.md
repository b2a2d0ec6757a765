# bmpchat

Counts the colours in BMP images and exchanges messages over TCP. The default
port is 8089. The package holds two pairs of programs:

- a **chat** pair. The server echoes back every message whose first word is `message:`.
- a **palette** pair. The client finds the most frequent colours of a BMP image and
  sends them to the server. The server draws them as an SVG pie chart and opens the
  chart in a browser.

## Installation

```
pip install .
```

## Chat

Start the server:

```
bmpchat-chat-server [--host HOST] [--port PORT]
```

The server listens on all addresses by default. Each client is served on its own
thread. Press Ctrl+C to stop it. From another terminal, run:

```
bmpchat-chat-client [--host HOST] [--port PORT]
```

The client connects to `127.0.0.1` by default. Type a line at the prompt. The
client sends it as `message: <line>`, and the server returns that text unchanged.
The server sends no reply to data that does not start with the word `message:`.
To quit, press Ctrl+D or Ctrl+C.

## Palette pie chart

Start the server:

```
bmpchat-pie-server [--host HOST] [--port PORT] [--svg FILE]
```

The server accepts one client at a time and reads one message from each. It echoes
chat messages. It treats any other message as a palette. For a palette it writes
the SVG file (`pie_chart.svg` by default) and runs `firefox` on it.

To send the dominant colours of an image:

```
bmpchat-palette-client picture.bmp [--host HOST] [--port PORT]
```

The client sends a message such as `couleurs: 10,#ff0000,#00ff00,...`. This message
holds:

- the number of distinct colours, up to 10;
- the hex codes of the most frequent colours, most frequent first.

The least frequent colour is never listed. The server draws each code as a slice
one tenth of a circle, starting at the top and going clockwise.

If you give the client any positional arguments after the image path, it does not
send colours. It asks for one chat message instead, sends it, and prints the reply.

## Library use

```python
from bmpchat.bmp import analyse_bmp_image
from bmpchat.palette_client import palette_message
from bmpchat.pie_server import render_pie_svg

counts = analyse_bmp_image("picture.bmp")   # least frequent colour first
message = palette_message(counts)
svg = render_pie_svg(message)
```

Functions and classes:

- `bmpchat.colors.count_colors` counts the distinct `Color` values in a sequence,
  in first-seen order. All colours must have the same bit depth; otherwise it raises
  `ValueError`.
- `bmpchat.colors.sort_color_counts` orders the counts from the rarest colour to
  the most frequent.
- `bmpchat.bmp.read_pixels` returns every pixel colour of an image.
- `bmpchat.bmp.BmpHeader` and `bmpchat.bmp.BmpInfoHeader` unpack the two file
  headers.
- `bmpchat.bmp.BmpFormatError` is raised for a bad signature, a truncated header
  or an unsupported bit count.

Only 24-bit and 32-bit BMP files are supported. The pixel area is read as one flat
run of bytes. Row padding and compression are not taken into account.

## Tests

```
pip install .[test]
pytest
```