"""
Benchmark suite for charview character access performance.

Compares CharIndexedText against approaches that keep only the UTF-8 bytes:
- Re-decoding the whole buffer on every access
- Walking the buffer from the start to find a character's byte offset
- Native str indexing (baseline, holds a decoded copy)

Measures access speed and memory usage across different text mixes.
"""
