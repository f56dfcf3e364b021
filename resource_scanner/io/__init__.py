"""I/O layer: output paths, Parquet schemas, and scan log persistence."""
