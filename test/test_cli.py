import numpy as np
from PIL import Image

from svdimg.cli import main


def write_image(path, height=12, width=8):
    img = np.random.randint(0, 256, size=(height, width, 3)).astype(np.uint8)
    Image.fromarray(img).save(path)
    return img


class TestMain:

    def test_compress(self, tmp_path, capsys):
        path_in = tmp_path / 'in.png'
        path_out = tmp_path / 'out.png'
        write_image(path_in)

        assert main([str(path_in), str(path_out), '--rank', '3']) == 0
        assert Image.open(path_out).size == (8, 12)
        assert 'rank = 3, mode = best' in capsys.readouterr().out

    def test_full_rank_is_lossless(self, tmp_path):
        path_in = tmp_path / 'in.png'
        path_out = tmp_path / 'out.png'
        img = write_image(path_in)

        assert main([str(path_in), str(path_out), '-r', '8', '-q']) == 0
        assert np.array_equal(np.array(Image.open(path_out)), img)

    def test_worst_grey(self, tmp_path, capsys):
        path_in = tmp_path / 'in.png'
        path_out = tmp_path / 'out.png'
        write_image(path_in)

        assert main([
            str(path_in),
            str(path_out), '-r', '2', '--worst', '--grey', '-v'
        ]) == 0
        assert Image.open(path_out).mode == 'L'
        out = capsys.readouterr().out
        assert 'GREY' in out
        assert 'mode = worst' in out

    def test_invalid_rank(self, tmp_path, capsys):
        path_in = tmp_path / 'in.png'
        path_out = tmp_path / 'out.png'
        write_image(path_in)

        assert main([str(path_in), str(path_out), '-r', '9']) == 1
        assert 'between 1 and 8' in capsys.readouterr().err
        assert not path_out.exists()

    def test_missing_input(self, tmp_path, capsys):
        path_out = tmp_path / 'out.png'
        assert main([str(tmp_path / 'missing.png'), str(path_out), '-r', '1'
                     ]) == 1
        assert capsys.readouterr().err
