"""Stream Embed — turn a byte stream into C++ source that recreates it.

WHY: Embedding a file's contents directly into program source avoids
shipping the file alongside the binary. Text files read best as a run of
string-literal write statements; arbitrary binary data needs numeric
byte arrays.

HOW: Two independent transcoders (ascii and binary) read standard input
to end of stream and write generated source to an explicit sink. The CLI
picks exactly one of them per invocation.

RULES:
- Transcoders keep no state between calls
- Every transcoder writes through a Sink, never to sys.stdout directly
- Adding a new output mode = one new transcoder module + one registry line
"""

__version__ = "2018.5.3"
