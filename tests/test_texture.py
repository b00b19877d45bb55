import pytest
from PIL import Image

from softray.texture import (
    CheckerTexture,
    ImageTexture,
    MarbledTexture,
    NoiseTexture,
    SolidColor,
    Texture,
    TurbulenceTexture,
)
from softray.vector import XYZ, Color


class _UVTexture(Texture):
    def value(self, u, v, p):
        return Color(u, v, p.x)


def test_solid_color_returns_its_color_everywhere():
    texture = SolidColor(Color(0.2, 0.3, 0.4))
    assert texture.value(0.0, 0.0, XYZ()) == Color(0.2, 0.3, 0.4)
    assert texture.value(0.7, 0.1, XYZ(5.0, -3.0, 2.0)) == Color(0.2, 0.3, 0.4)


def test_texture_is_abstract():
    with pytest.raises(TypeError):
        Texture()


def test_checker_picks_even_where_sines_positive():
    odd, even = Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9)
    checker = CheckerTexture(odd, even)
    assert checker.value(0.0, 0.0, XYZ(0.1, 0.1, 0.1)) == even
    assert checker.value(0.0, 0.0, XYZ(-0.1, 0.1, 0.1)) == odd


def test_checker_zero_product_is_odd():
    odd, even = Color(0.0, 0.0, 0.0), Color(1.0, 1.0, 1.0)
    checker = CheckerTexture(odd, even)
    assert checker.value(0.5, 0.5, XYZ(0.0, 0.0, 0.0)) == odd


def test_checker_accepts_textures():
    checker = CheckerTexture(_UVTexture(), SolidColor(Color(1.0, 1.0, 1.0)))
    assert checker.value(0.25, 0.75, XYZ(-0.1, 0.1, 0.1)) == Color(0.25, 0.75, -0.1)


def test_noise_texture_is_mid_grey_on_lattice_points():
    texture = NoiseTexture(4.0)
    assert texture.value(0.0, 0.0, XYZ(0.25, 0.5, 1.0)) == Color(0.5, 0.5, 0.5)


def test_turbulence_texture_is_black_on_lattice_points():
    texture = TurbulenceTexture(2.0)
    assert texture.value(0.0, 0.0, XYZ(1.0, 0.5, 1.5)) == Color(0.0, 0.0, 0.0)


def test_marbled_texture_at_origin():
    texture = MarbledTexture(4.0)
    assert texture.value(0.0, 0.0, XYZ(0.0, 0.0, 0.0)) == Color(0.5, 0.5, 0.5)


def test_noise_textures_stay_grey():
    for texture in (NoiseTexture(3.0), MarbledTexture(3.0), TurbulenceTexture(3.0)):
        colour = texture.value(0.0, 0.0, XYZ(0.37, 1.21, -2.6))
        assert colour.x == colour.y == colour.z
        assert colour.x >= 0.0


def test_image_texture_missing_file_is_blue(tmp_path):
    texture = ImageTexture(tmp_path / "absent.png")
    assert not texture.loaded
    assert texture.value(0.5, 0.5, XYZ()) == Color(0.0, 0.0, 1.0)


def test_image_texture_unreadable_file_is_blue(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image")
    texture = ImageTexture(path)
    assert texture.value(0.1, 0.9, XYZ()) == Color(0.0, 0.0, 1.0)


@pytest.fixture
def quad_image(tmp_path):
    image = Image.new("RGB", (2, 2))
    image.putpixel((0, 0), (255, 0, 0))
    image.putpixel((1, 0), (0, 255, 0))
    image.putpixel((0, 1), (0, 0, 255))
    image.putpixel((1, 1), (255, 255, 255))
    path = tmp_path / "quad.png"
    image.save(path)
    return path


def test_image_texture_samples_corners(quad_image):
    texture = ImageTexture(quad_image)
    assert texture.loaded
    assert (texture.width, texture.height) == (2, 2)
    assert tuple(texture.value(0.0, 1.0, XYZ())) == pytest.approx((1.0, 0.0, 0.0))
    assert tuple(texture.value(1.0, 1.0, XYZ())) == pytest.approx((0.0, 1.0, 0.0))
    assert tuple(texture.value(0.0, 0.0, XYZ())) == pytest.approx((0.0, 0.0, 1.0))
    assert tuple(texture.value(1.0, 0.0, XYZ())) == pytest.approx((1.0, 1.0, 1.0))


def test_image_texture_clamps_coordinates(quad_image):
    texture = ImageTexture(quad_image)
    assert texture.value(-3.0, 7.0, XYZ()) == texture.value(0.0, 1.0, XYZ())
    assert texture.value(4.0, -1.0, XYZ()) == texture.value(1.0, 0.0, XYZ())