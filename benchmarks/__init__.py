"""
Benchmark suite for jzonc JSONC parsing performance.

Compares jzonc against standard JSON libraries on comment-free input:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed and memory usage across different data types.
"""
