import pytest

from introspection import BeanAccessor, MetadataRegistry


@pytest.fixture
def registry() -> MetadataRegistry:
    """A registry isolated from the process-wide one."""
    return MetadataRegistry()


@pytest.fixture
def accessor(registry) -> BeanAccessor:
    return BeanAccessor(registry=registry, strict=False)


@pytest.fixture
def strict_accessor(registry) -> BeanAccessor:
    return BeanAccessor(registry=registry, strict=True)
