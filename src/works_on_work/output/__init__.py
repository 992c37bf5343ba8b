"""Output directory handling: clean, write pages, copy static files."""

from works_on_work.output.writer import copy_file, copy_tree, prepare_output_dir, write_page

__all__ = ["copy_file", "copy_tree", "prepare_output_dir", "write_page"]
