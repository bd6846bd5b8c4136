import numpy as np
import pytest

from olio.light import AmbientLight, Light, PointLight
from olio.material import Material, PhongMaterial
from olio.ray import HitRecord
from olio.surface import Surface

UP = np.array([0.0, 0.0, 1.0])


def _hit(material):
    surface = Surface()
    surface.material = material
    return HitRecord(ray_t=1.0, point=np.zeros(3), normal=UP, surface=surface)


def _phong(diffuse=(1.0, 0.5, 0.25), specular=(0.0, 0.0, 0.0), ambient=(0.3, 0.6, 0.9)):
    return PhongMaterial(ambient=ambient, diffuse=diffuse, specular=specular, shininess=10)


def test_base_light_contributes_nothing():
    light = Light()
    assert light.name == "Light"
    assert list(light.illuminate(_hit(_phong()), UP)) == [0.0, 0.0, 0.0]


def test_ambient_light_with_unit_intensity_returns_material_ambient():
    material = _phong()
    light = AmbientLight((1.0, 1.0, 1.0))
    assert light.illuminate(_hit(material), UP) == pytest.approx(material.ambient)


def test_ambient_light_without_material_is_black():
    light = AmbientLight((1.0, 1.0, 1.0))
    assert list(light.illuminate(_hit(None), UP)) == [0.0, 0.0, 0.0]


def test_ambient_light_non_phong_material_is_black():
    light = AmbientLight((1.0, 1.0, 1.0))
    assert list(light.illuminate(_hit(Material()), UP)) == [0.0, 0.0, 0.0]


def test_point_light_diffuse_only():
    material = _phong()
    light = PointLight(position=(0.0, 0.0, 2.0), intensity=(4.0, 4.0, 4.0))
    result = light.illuminate(_hit(material), np.array([1.0, 0.0, 1.0]))
    assert result == pytest.approx(material.diffuse)


def test_point_light_specular_highlight_along_normal():
    material = _phong(specular=(0.5, 0.5, 0.5))
    light = PointLight(position=(0.0, 0.0, 2.0), intensity=(4.0, 4.0, 4.0))
    result = light.illuminate(_hit(material), UP * 3)
    assert result == pytest.approx(material.diffuse + material.specular)


def test_point_light_inverse_square_falloff():
    material = _phong()
    near = PointLight(position=(0.0, 0.0, 1.0), intensity=(1.0, 1.0, 1.0))
    far = PointLight(position=(0.0, 0.0, 2.0), intensity=(1.0, 1.0, 1.0))
    hit = _hit(material)
    assert far.illuminate(hit, UP) * 4 == pytest.approx(near.illuminate(hit, UP))


def test_point_light_behind_surface_is_black():
    light = PointLight(position=(0.0, 0.0, -2.0), intensity=(4.0, 4.0, 4.0))
    assert light.illuminate(_hit(_phong()), UP) == pytest.approx([0.0, 0.0, 0.0])


def test_point_light_without_material_is_black():
    light = PointLight(position=(0.0, 0.0, 2.0), intensity=(4.0, 4.0, 4.0))
    assert list(light.illuminate(_hit(None), UP)) == [0.0, 0.0, 0.0]


def test_default_names():
    assert PointLight().name == "PointLight"
    assert AmbientLight().name == "AmbientLight"