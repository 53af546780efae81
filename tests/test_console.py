import io
from rich.console import Console
from int_line_store import write_to_file
from int_line_store.console import progress_printer

def test_progress_printer_output(tmp_path):
    buf = io.StringIO()
    con = Console(file=buf, force_terminal=False, color_system=None, width=200)
    write_to_file(tmp_path / "x.txt", [1, 2, 3], on_progress=lambda e: progress_printer(e, con))
    out = buf.getvalue().splitlines()
    assert out[0].startswith("[progress] write 0% - ")
    assert out[-1] == "[progress] write 100% - 3 written"
