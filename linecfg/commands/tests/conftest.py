import pytest

from linecfg.context import create_file_write


@pytest.fixture()
def project_file(tmp_path):
    path = tmp_path / "project.cfg"
    with create_file_write(path) as ctx:
        ctx.add_line("VERSION 1")
        ctx.add_line("<TRACK %s 7", '"lead vocal"')
        ctx.add_line("VOLUME 0.5")
        ctx.add_line("<ITEM")
        ctx.add_line("POSITION 12.5")
        ctx.add_line(">")
        ctx.add_line(">")
        ctx.add_line("<EMPTY")
        ctx.add_line(">")
    return path
