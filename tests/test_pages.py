import pytest

from portfolio.pages import (
    METEORITE_PHOTOS,
    REVEAL_PHOTOS,
    SKILLS,
    PhotoCarousel,
    SkillTransform,
    about_styles,
    skill_transforms,
)


def test_about_styles_start_hidden_and_offset():
    left, right = about_styles(0.0)
    assert left == (
        "transform: translateX(-100%) scale(1); opacity: 0; transition: all 0.4s ease-out;"
    )
    assert "translateX(100%)" in right
    assert "opacity: 0;" in right


def test_about_styles_fully_shown():
    left, right = about_styles(1.0)
    assert "opacity: 1;" in left
    assert "opacity: 1;" in right
    assert "translateX(0%)" in right


def test_about_styles_are_mirrored():
    left, right = about_styles(0.5)
    assert "translateX(-50%)" in left
    assert "translateX(50%)" in right
    assert "opacity: 0.5;" in left and "opacity: 0.5;" in right


def test_skill_transforms_at_start_match_initial_layout():
    transforms = skill_transforms(0.0)
    assert [(t.name, t.x, t.y, t.rotation) for t in transforms] == list(SKILLS)


def test_skill_transforms_at_end_are_at_rest():
    transforms = skill_transforms(1.0)
    assert len(transforms) == len(SKILLS)
    assert all(t.x == 0 and t.y == 0 and t.rotation == 0 for t in transforms)


def test_skill_transforms_halfway_are_halved():
    for half, (name, x, y, r) in zip(skill_transforms(0.5), SKILLS):
        assert half.name == name
        assert half.x == pytest.approx(x / 2)
        assert half.y == pytest.approx(y / 2)
        assert half.rotation == pytest.approx(r / 2)


def test_skill_style_formats_two_decimals():
    react = skill_transforms(0.0)[0]
    assert react.style() == (
        "transform: translate(975.30px, -856.42px) rotate(18.60deg); "
        "transition: transform 0.3s ease-out;"
    )


def test_skill_style_of_custom_transform():
    style = SkillTransform("Rust", 1.0, -2.0, 3.0).style()
    assert "translate(1.00px, -2.00px)" in style
    assert "rotate(3.00deg)" in style


def test_carousel_advances_and_wraps():
    carousel = PhotoCarousel(METEORITE_PHOTOS)
    assert carousel.current() == "img/Meteorite1.png"
    seen = [carousel.advance() for _ in range(len(METEORITE_PHOTOS))]
    assert seen == list(range(1, len(METEORITE_PHOTOS))) + [0]
    assert carousel.current() == "img/Meteorite1.png"


def test_carousel_select():
    carousel = PhotoCarousel(REVEAL_PHOTOS)
    carousel.select(3)
    assert carousel.index == 3
    assert carousel.current() == "img/Reveal4.png"


@pytest.mark.parametrize("index", [-1, 7, 100])
def test_carousel_select_out_of_range(index):
    carousel = PhotoCarousel(REVEAL_PHOTOS)
    with pytest.raises(IndexError):
        carousel.select(index)
    assert carousel.index == 0


def test_carousel_requires_photos():
    with pytest.raises(ValueError):
        PhotoCarousel(())


def test_carousel_rejects_bad_start_index():
    with pytest.raises(IndexError):
        PhotoCarousel(("a.png",), index=1)