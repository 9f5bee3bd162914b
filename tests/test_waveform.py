import math

import pytest

from portfolio.transform import Vec3
from portfolio.waveform import (
    Waveform,
    WaveformModification,
    animate,
    apply_modifications,
    particle_positions,
    unit_radius,
    wave_height,
)


def test_default_waveform():
    assert Waveform() == Waveform(amplitude=2.0, wavelength=30.0, omega=0.5)


def test_apply_no_modifications_keeps_settings():
    wave = Waveform(1.0, 2.0, 3.0)
    assert apply_modifications(wave, []) == wave


def test_apply_modifications_last_wins():
    mods = [WaveformModification(5.0, 10.0, 1.0), WaveformModification(7.0, 40.0, 2.5)]
    assert apply_modifications(Waveform(), mods) == Waveform(7.0, 40.0, 2.5)


def test_unit_radius_boundary_is_one():
    assert unit_radius(100, 100, 10) == 1.0
    assert unit_radius(91, 100, 10) == 1.0


def test_unit_radius_index_zero_is_nan():
    assert unit_radius(0, 100, 10) == pytest.approx(math.nan, nan_ok=True)


def test_unit_radius_rejects_too_many_boundary_points():
    with pytest.raises(ValueError):
        unit_radius(1, 10, 11)


def test_particle_positions_count_and_plane():
    positions = particle_positions()
    assert len(positions) == 5_000
    finite = [p for p in positions if not math.isnan(p.x)]
    assert len(finite) == 4_999
    assert all(p.z == 0.0 for p in finite)


def test_wave_height_origin_at_zero_time():
    assert wave_height(Waveform(), 0.0, 0.0, 0.0) == pytest.approx(0.0)


def test_wave_height_periodic_in_wavelength():
    wave = Waveform(amplitude=3.0, wavelength=20.0, omega=1.0)
    a = wave_height(wave, 5.0, 0.0, 2.0)
    b = wave_height(wave, 25.0, 0.0, 2.0)
    assert a == pytest.approx(b)


def test_wave_height_radially_symmetric_and_bounded():
    wave = Waveform(amplitude=4.0, wavelength=17.0, omega=0.3)
    assert wave_height(wave, 3.0, 4.0, 1.5) == pytest.approx(wave_height(wave, 0.0, -5.0, 1.5))
    heights = [wave_height(wave, x * 0.7, 0.0, 0.1 * x) for x in range(100)]
    assert max(abs(h) for h in heights) <= 4.0 + 1e-12


def test_wave_height_zero_wavelength_raises():
    with pytest.raises(ValueError):
        wave_height(Waveform(wavelength=0.0), 1.0, 1.0, 0.0)


def test_animate_keeps_xy_and_sets_height():
    wave = Waveform()
    particles = [Vec3(1.0, 2.0, 0.0), Vec3(-10.0, 3.0, 0.0)]
    moved = animate(wave, particles, 4.0)
    assert [(p.x, p.y) for p in moved] == [(1.0, 2.0), (-10.0, 3.0)]
    assert [p.z for p in moved] == [wave_height(wave, p.x, p.y, 4.0) for p in particles]


def test_zero_amplitude_is_flat():
    moved = animate(Waveform(amplitude=0.0), particle_positions(50, 1, 5.0)[1:], 3.0)
    assert all(p.z == 0.0 for p in moved)