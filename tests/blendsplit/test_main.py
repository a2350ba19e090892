import logging
import os
import sys

import pytest

from blendsplit.__main__ import clamp, main
from blendsplit.api import pil_io

from .utils import BLACK, WHITE, pixels, solid

logger = logging.getLogger(__name__)


@pytest.fixture
def images(tmpdir):
    paths = []
    for name, color in (("black.png", BLACK), ("white.png", WHITE)):
        path = tmpdir.join(name).strpath
        pil_io.save(solid(16, 16, color), path)
        paths.append(path)
    return paths


@pytest.mark.parametrize(
    "argv",
    [
        ["-h"],
        ["--version"],
        [],
        ["merge", "-h"],
        ["split", "-h"],
    ],
)
def test_main_exit(argv):
    with pytest.raises(SystemExit):
        main(argv)
        sys.exit()


@pytest.mark.parametrize(
    "extra, expected",
    [
        ([], BLACK),
        (["--invert"], WHITE),
        (["--mode", "screen"], WHITE),
    ],
)
def test_main_merge(images, tmpdir, extra, expected):
    output = tmpdir.join("merged.png").strpath
    assert main(["merge"] + images + ["-o", output] + extra) is None
    assert pixels(pil_io.open_image(output)) == {expected}


def test_main_merge_verbose(images, tmpdir):
    output = tmpdir.join("merged.png").strpath
    assert main(["--verbose", "merge"] + images + ["-o", output, "--mode", "multiply"]) is None
    assert pixels(pil_io.open_image(output)) == {BLACK}


def test_main_merge_single_image(images, tmpdir):
    output = tmpdir.join("merged.png").strpath
    assert main(["merge", images[0], "-o", output]) == 1
    assert not os.path.exists(output)


def test_main_merge_decode_error(images, tmpdir):
    broken = tmpdir.join("broken.png")
    broken.write_binary(b"not an image")
    output = tmpdir.join("merged.png").strpath
    assert main(["merge", images[0], broken.strpath, "-o", output]) == 1


@pytest.mark.parametrize(
    "extra, count",
    [
        ([], 3),
        (["--layers", "2", "--seed", "0.5"], 2),
        (["--layers", "25", "--block-size", "4"], 10),
        (["--layers", "0", "--block-size", "512", "--invert"], 2),
        (["--layers", "0", "--block-size", "0"], 2),
    ],
)
def test_main_split(images, tmpdir, extra, count):
    output = tmpdir.join("layers").strpath
    assert main(["split", images[1], "-o", output] + extra) is None
    assert set(os.listdir(output)) == {"layer_%d.png" % (i + 1) for i in range(count)}


def test_main_split_reproducible(images, tmpdir):
    outputs = [tmpdir.join("a").strpath, tmpdir.join("b").strpath]
    for output in outputs:
        main(["split", images[1], "-o", output, "--block-size", "8", "--seed", "0.25"])
    for name in os.listdir(outputs[0]):
        assert pil_io.open_image(os.path.join(outputs[0], name)) == pil_io.open_image(
            os.path.join(outputs[1], name)
        )


def test_main_split_invalid_seed(images, tmpdir):
    output = tmpdir.join("layers").strpath
    assert main(["split", images[1], "-o", output, "--seed", "2"]) == 1


def test_main_split_missing_file(tmpdir):
    output = tmpdir.join("layers").strpath
    assert main(["split", tmpdir.join("missing.png").strpath, "-o", output]) == 1


def test_main_split_output_is_file(images, tmpdir):
    output = tmpdir.join("taken")
    output.write_binary(b"")
    assert main(["split", images[1], "-o", output.strpath]) == 1


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 32),
        (-5, 8),
        (7, 8),
        (16, 16),
        (200, 128),
    ],
)
def test_clamp(value, expected):
    assert clamp(value, 8, 128, "Block size", 32) == expected
