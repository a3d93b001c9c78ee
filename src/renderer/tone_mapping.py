# renderer/tone_mapping.py
import numpy as np

def gamma_correct(image: np.ndarray) -> np.ndarray:
    """
    Gamma-2 encode a linear radiance image into 8-bit values: sqrt, clamp
    to [0, 0.999] and scale by 256, so every channel lands in [0, 255].
    NaN samples become black.
    """
    linear = np.nan_to_num(np.asarray(image, dtype=np.float64), nan=0.0)
    encoded = np.sqrt(np.clip(linear, 0.0, None))
    return (256 * np.clip(encoded, 0.0, 0.999)).astype(np.uint8)

def reinhard_tone_mapping(accumulated, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    accumulated = np.nan_to_num(np.asarray(accumulated, dtype=np.float64), nan=0.0)
    scaled = np.clip(accumulated, 0.0, None) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    output = (mapped * 255).clip(0, 255).astype("uint8")
    return output

TONE_MAPPERS = {
    "gamma": gamma_correct,
    "reinhard": reinhard_tone_mapping,
}
