import pygame
import pytest

from raycaster.surface import PygameSurface, Surface
from raycaster.vector import Vector2


def test_nested_transforms_compose_and_restore(recording_surface):
    s = recording_surface
    with s.transformed((10, 20), (2, 2)):
        assert s.to_pixels(Vector2(1, 1)) == Vector2(12, 22)
        with s.transformed((1, 1), (3, 3)):
            # translate (1, 1) in the outer space, then scale by 2 * 3
            assert s.to_pixels(Vector2(1, 1)) == Vector2(18, 28)
            assert s.to_local(Vector2(18, 28)) == Vector2(1, 1)
        assert s.to_pixels(Vector2(1, 1)) == Vector2(12, 22)
    assert s.to_pixels(Vector2(1, 1)) == Vector2(1, 1)


def test_transform_restored_when_drawing_fails(recording_surface):
    with pytest.raises(RuntimeError):
        with recording_surface.transformed((5, 5), (4, 4)):
            raise RuntimeError("boom")
    assert recording_surface.to_pixels(Vector2(2, 2)) == Vector2(2, 2)


def test_primitives_are_mapped_to_pixels(recording_surface):
    s = recording_surface
    with s.transformed((100, 50), (10, 10)):
        s.fill_rect(Vector2(1, 2), Vector2(3, 1), "red")
        s.stroke_line(Vector2(0, 0), Vector2(1, 0), "blue", 0.2)
        s.circle(Vector2(1, 1), 0.5, "green", fill="yellow")
    s.clear("black")
    assert s.calls[0] == ("rect", (110.0, 70.0, 30.0, 10.0), "red")
    assert s.calls[1] == ("line", Vector2(100, 50), Vector2(110, 50), "blue", 2)
    assert s.calls[2] == ("ellipse", (105.0, 55.0, 10.0, 10.0), "yellow", 0)
    assert s.calls[3][0] == "ellipse" and s.calls[3][2] == "green"
    assert s.calls[4] == ("fill", "black")


def test_thin_lines_are_at_least_one_pixel(recording_surface):
    recording_surface.stroke_line(Vector2(0, 0), Vector2(5, 5), "white", 0.01)
    assert recording_surface.calls[-1][4] == 1


def test_base_surface_requires_implementation():
    s = Surface()
    with pytest.raises(NotImplementedError):
        s.clear("black")
    with pytest.raises(NotImplementedError):
        s.size


def test_pygame_surface_draws_pixels():
    target = pygame.Surface((40, 30))
    s = PygameSurface(target)
    assert s.size == (40, 30)
    s.clear("red")
    assert target.get_at((0, 0)) == pygame.Color("red")
    s.stroke_line(Vector2(0, 5), Vector2(39, 5), "green", 1)
    assert target.get_at((20, 5)) == pygame.Color("green")
    s.circle(Vector2(20, 20), 4, "white", fill="blue")
    assert target.get_at((20, 20)) == pygame.Color("blue")


def test_pygame_surface_clips_oversized_rects():
    target = pygame.Surface((40, 30))
    s = PygameSurface(target)
    s.clear("black")
    # A strip far taller than the screen, as a wall right at the eye produces
    s.fill_rect(Vector2(8, -1e9), Vector2(4, 2e9 + 30), (0, 0, 255))
    assert target.get_at((9, 0)) == pygame.Color(0, 0, 255)
    assert target.get_at((9, 29)) == pygame.Color(0, 0, 255)
    assert target.get_at((4, 15)) == pygame.Color("black")
    # Entirely off-screen rects are ignored
    s.fill_rect(Vector2(100, 100), Vector2(5, 5), "red")
    assert target.get_at((39, 29)) == pygame.Color("black")
