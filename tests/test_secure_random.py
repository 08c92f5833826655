import pytest

import secrand
from secrand.errors import RandomSourceUnavailable
from secrand.random_source import RandomSourceProvider, reset_provider
from secrand.utils import BackendPreference, Settings


@pytest.fixture
def install_library(make_source):
    """Install a global provider whose library backend replays the given chunks."""
    def _install(chunks=None, fill=None):
        library = make_source(chunks=chunks, fill=fill, name="library")
        device = make_source(available=False, name="device")
        reset_provider(RandomSourceProvider(library=library, device=device))
        return library
    return _install


def test_hex_with_stubbed_library(install_library):
    install_library(fill=0x05)
    assert secrand.hex(1) == "05"


def test_random_bytes_default(install_library):
    library = install_library(fill=0x01)
    assert secrand.random_bytes() == b"\x01" * 16
    assert library.calls == [16]


def test_positive_bound_gives_integer(install_library):
    install_library(chunks=[b"\x1f", b"\x17", b"\x27"])
    result = secrand.secure_random(16)
    assert result == 7
    assert isinstance(result, int)


@pytest.mark.parametrize("argument", [(), (0,), (-5,), (-0.5,)])
def test_non_positive_gives_float(install_library, argument):
    library = install_library(fill=0x00)
    result = secrand.secure_random(*argument)
    assert result == 0.0
    assert isinstance(result, float)
    assert library.calls == [8]


def test_bound_of_one():
    for _ in range(100):
        assert secrand.secure_random(1) == 0


def test_real_values_in_range():
    for _ in range(1000):
        assert 0 <= secrand.secure_random(10) < 10
        assert 0.0 <= secrand.secure_random() < 1.0
        assert 0.0 <= secrand.uniform_float() < 1.0


def test_fractional_bound_rejected(install_library):
    install_library(fill=0x00)
    with pytest.raises(TypeError):
        secrand.secure_random(2.5)


def test_bounded_integer_requires_positive(install_library):
    install_library(fill=0x00)
    with pytest.raises(ValueError):
        secrand.bounded_integer(0)


def test_failures_propagate_unchanged(make_source):
    """With no usable source every entry point fails, nothing falls back."""
    reset_provider(RandomSourceProvider(
        Settings(backend=BackendPreference.LIBRARY),
        library=make_source(available=False, name="library"),
        device=make_source(fill=0x00, name="device"),
    ))

    for call in (
        lambda: secrand.random_bytes(4),
        lambda: secrand.hex(4),
        lambda: secrand.base64(4),
        lambda: secrand.secure_random(10),
        lambda: secrand.secure_random(),
        secrand.uniform_float,
    ):
        with pytest.raises(RandomSourceUnavailable):
            call()


def test_sampling_cap_from_settings(make_source):
    """The global sampler honours the configured rejection cap."""
    reset_provider(RandomSourceProvider(
        Settings(max_rejections=3),
        library=make_source(fill=0x1F, name="library"),
        device=make_source(available=False, name="device"),
    ))

    with pytest.raises(secrand.SamplingExhausted):
        secrand.secure_random(16)
