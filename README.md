# dot11kit

dot11kit is a small, dependency-free toolkit for two jobs around IEEE 802.11 (Wi-Fi) captures:

- walking the fields of a radiotap capture header;
- checking MAC addresses against tables of known client and access-point vendor prefixes.

## Installing

```
pip install .
```

## Modules

### `dot11kit.radiotap`

`RadiotapIterator(data, vendor_namespaces=None, overrides=None)` walks the present fields of a radiotap header in order. `iterate(...)` takes the same arguments and returns such an iterator.

The iterator handles:

- extended presence bitmaps;
- field alignment, counted from the start of the header;
- namespace switching through bits 29 and 30;
- vendor namespaces that you register as `Namespace` objects;
- `Override` entries that replace the layout of a standard field.

Each field comes back as a `RadiotapArgument` with these members:

- `index`: the bit number of the field;
- `offset`: where the field starts in the header;
- `data`: its raw little-endian bytes;
- `size`: its length;
- `namespace` and `is_radiotap_ns`: which namespace the field belongs to.

A vendor namespace that was not registered is reported once, with `index` equal to `RadiotapField.VENDOR_NAMESPACE`. Its `data` holds the six-octet vendor header followed by all of the vendor data.

The layouts of the standard fields are in `RADIOTAP_NAMESPACE`.

Malformed input raises `RadiotapError`, a subclass of `ValueError`. That covers:

- data shorter than the 8-octet header;
- a version other than 0;
- a stated length beyond the data;
- bitmaps or field data that run past the stated length.

```python
from dot11kit.radiotap import iterate

# version 0, length 10, FLAGS and RATE present
header = bytes.fromhex("00000a0006000000100c")
for arg in iterate(header):
    print(arg.index, arg.offset, arg.data.hex())
# 1 8 10
# 2 9 0c
```

### `dot11kit.radiotap_defs`

This module holds the radiotap definitions:

- field bit numbers: `RadiotapField`;
- flag sets: `ChannelFlags`, `RadiotapFlags` and `McsKnown`;
- constants for the RX, TX, A-MPDU and MCS flag octets.

Two helpers decode the MCS flags octet:

- `mcs_bandwidth(flags)` returns the bandwidth code;
- `mcs_stbc_streams(flags)` returns the STBC stream count.

Both raise `ValueError` for a value that does not fit in one octet.

### `dot11kit.radiotap_legacy`

`LegacyRadiotapIterator(data, max_length=None)` is a simpler walker. It knows only fields 0 to 13 of the first presence bitmap. It skips extended bitmaps to find the field data, but does not report the fields they announce, and it does not recognise vendor namespaces. It yields the same `RadiotapArgument` objects and raises `LegacyRadiotapError` on malformed input.

`channel_to_mhz(channel)` converts a channel number to its centre frequency:

- channel 14 is 2484 MHz;
- channels 1 to 13 are `5 * channel + 2407`;
- higher channels are `(channel + 1000) * 5`.

### `dot11kit.radiotap_dump`

`format_arguments(data, fcshdr=False)` returns the text lines that describe each field of a radiotap header:

- TSFT, flags, rate and RX flags are printed with their values;
- other known standard fields are passed over silently;
- unregistered vendor namespaces are shown as a hex dump.

With `fcshdr`, field 14 is read as a 4-byte FCS rather than as RX flags.

```python
from dot11kit.radiotap_dump import format_arguments

format_arguments(bytes.fromhex("00000a0006000000100c"))
# ['\tflags: 10', '\trate: 6.000000']
```

### `dot11kit.vendors`

This module holds two tables of known vendor prefixes:

- `client_masks()` for client devices;
- `accesspoint_masks()` for access points.

Each table is a tuple of `PrefixMask` entries, each made of a 6-byte prefix and a mask. `PrefixMask.matches(mac)` tells whether the masked bits of a MAC equal those of the prefix. `parse_entry("001122000000/FFFFFF000000")` builds one entry from text.

`is_known_client(mac)` and `is_known_accesspoint(mac)` check a MAC against the tables. A MAC may be given as six bytes, or as twelve hex digits, optionally separated by `:`, `-` or `.`. Anything else raises `ValueError`.

```python
from dot11kit.vendors import is_known_accesspoint

is_known_accesspoint("00:0C:41:12:34:56")  # True
```

## Command line

```
dot11kit-radiotap-dump [--fcshdr] capture.bin
```

The command reads a file that begins with a radiotap header and prints one line per field it describes.

With `--fcshdr`, field 14 is read as a 4-byte FCS.

It exits with:

- status 0 on success;
- status 2 on a usage error or a file that cannot be opened;
- status 3 if the header or its field data is malformed.

## What it does not do

dot11kit reads only the radiotap header in front of a captured frame. It does not:

- build 802.11 frames;
- decode the frames that follow the header (addresses, SSIDs, sequence numbers);
- capture packets from or send packets to a wireless interface;
- read or write pcap files.

## Running the tests

```
pip install .[test]
pytest
```