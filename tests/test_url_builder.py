"""Unit tests for ImageUrlBuilder.

Tests the parameter store, URL serialization, and the resize entry point.
"""

import pytest

from cl_image_url import ImageUrlBuilder, InvalidArgumentError, ResizeBuilder, resize

# ============================================================================
# Parameter Store Tests
# ============================================================================


def test_new_builder_has_empty_store(url_builder: ImageUrlBuilder):
    """Test a new builder starts with no parameters."""
    assert dict(url_builder.parameters) == {}
    assert url_builder.path == "/images/photo.jpg"


def test_set_parameter_last_write_wins(url_builder: ImageUrlBuilder):
    """Test setting the same key twice keeps only the last value."""
    url_builder.set_parameter("width", "100")
    url_builder.set_parameter("width", "300")

    assert dict(url_builder.parameters) == {"width": "300"}


def test_set_parameter_rejects_empty_key(url_builder: ImageUrlBuilder):
    """Test an empty parameter name is rejected."""
    with pytest.raises(InvalidArgumentError):
        url_builder.set_parameter("", "100")

    assert dict(url_builder.parameters) == {}


def test_parameters_view_is_read_only(url_builder: ImageUrlBuilder):
    """Test the store cannot be mutated through the exposed view."""
    url_builder.set_parameter("width", "100")

    with pytest.raises(TypeError):
        url_builder.parameters["width"] = "200"  # type: ignore[index]


# ============================================================================
# Serialization Tests
# ============================================================================


def test_build_without_parameters_returns_path(url_builder: ImageUrlBuilder):
    """Test building with an empty store returns the path unchanged."""
    assert url_builder.build() == "/images/photo.jpg"


def test_build_appends_query_in_insertion_order(url_builder: ImageUrlBuilder):
    """Test parameters are serialized in the order they were first set."""
    url_builder.set_parameter("width", "200")
    url_builder.set_parameter("height", "100")
    url_builder.set_parameter("mode", "crop")

    assert url_builder.build() == "/images/photo.jpg?width=200&height=100&mode=crop"
    assert str(url_builder) == url_builder.build()


def test_build_merges_existing_query():
    """Test parameters are merged into a query already on the path."""
    builder = ImageUrlBuilder("https://images.example.com/photo.jpg?v=3")
    builder.set_parameter("width", "200")

    assert builder.build() == "https://images.example.com/photo.jpg?v=3&width=200"


def test_build_overrides_existing_query_key():
    """Test a store value replaces the same key already on the path."""
    builder = ImageUrlBuilder("/photo.jpg?width=50")
    builder.set_parameter("width", "200")

    assert builder.build() == "/photo.jpg?width=200"


# ============================================================================
# Resize Entry Point Tests
# ============================================================================


def test_resize_returns_same_builder(url_builder: ImageUrlBuilder):
    """Test resize returns the builder it was given."""
    result = resize(url_builder, lambda img: img.width(200))

    assert result is url_builder
    assert dict(url_builder.parameters) == {"width": "200"}


def test_resize_passes_resize_builder_bound_to_store(url_builder: ImageUrlBuilder):
    """Test the callback receives a ResizeBuilder writing to the same store."""
    received: list[ResizeBuilder] = []

    _ = resize(url_builder, received.append)

    assert len(received) == 1
    assert isinstance(received[0], ResizeBuilder)
    assert received[0].builder is url_builder


def test_resize_method_chains(url_builder: ImageUrlBuilder):
    """Test the builder method form returns the builder for chaining."""
    url = url_builder.resize(lambda img: img.width(200).height(100).crop()).build()

    assert url == "/images/photo.jpg?width=200&height=100&mode=crop"


def test_resize_requires_builder():
    """Test resize fails when the builder is missing."""
    with pytest.raises(InvalidArgumentError, match="builder"):
        _ = resize(None, lambda img: img.width(200))  # type: ignore[arg-type]


def test_resize_requires_callback(url_builder: ImageUrlBuilder):
    """Test resize fails when the callback is missing, without touching the store."""
    with pytest.raises(InvalidArgumentError, match="configure"):
        _ = resize(url_builder, None)  # type: ignore[arg-type]

    assert dict(url_builder.parameters) == {}


def test_resize_rejects_non_callable(url_builder: ImageUrlBuilder):
    """Test resize fails when the callback cannot be called."""
    with pytest.raises(InvalidArgumentError):
        _ = url_builder.resize("width=200")  # type: ignore[arg-type]


def test_invalid_argument_error_is_value_error():
    """Test InvalidArgumentError can be caught as ValueError."""
    error = InvalidArgumentError("Width must be greater than 0.")

    assert isinstance(error, ValueError)
    assert str(error) == "Width must be greater than 0."
    assert error.message == "Width must be greater than 0."
