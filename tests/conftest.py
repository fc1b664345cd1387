import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import car_configurator
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from car_configurator.builder import CarBuilder  # noqa: E402
from car_configurator.core.models import (  # noqa: E402
    CarModel,
    Color,
    EngineType,
    ExteriorFeature,
    InteriorFeature,
    SafetyFeature,
    TransmissionType,
)


# Common test fixtures
@pytest.fixture
def builder():
    """Return a fresh CarBuilder."""
    return CarBuilder()


@pytest.fixture
def luxury_suv():
    """Fully-loaded silver SUV (same options as the luxury preset)."""
    return (
        CarBuilder()
        .with_model(CarModel.SUV)
        .with_engine(EngineType.V8)
        .with_transmission(TransmissionType.AUTOMATIC)
        .set_color(Color.SILVER)
        .add_interior_features(InteriorFeature.LEATHER, InteriorFeature.GPS, InteriorFeature.SOUND_SYSTEM)
        .add_exterior_features(ExteriorFeature.SUNROOF, ExteriorFeature.SPORT_RIMS)
        .add_safety_features(SafetyFeature.ABS, SafetyFeature.AIRBAGS, SafetyFeature.REAR_CAMERA)
        .build()
    )


@pytest.fixture
def minimal_sedan():
    """Sedan with only the mandatory fields set."""
    return (
        CarBuilder()
        .with_model(CarModel.SEDAN)
        .with_engine(EngineType.V6)
        .with_transmission(TransmissionType.AUTOMATIC)
        .build()
    )
