# renderer/tone_mapping.py
import numpy as np

def gamma_correct(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Average accumulated radiance over the samples, gamma-correct for
    gamma=2.0 and quantize to 8 bits.
    """
    scale = 1.0 / samples_per_pixel
    # NaN samples (degenerate geometry) are written as black.
    averaged = np.nan_to_num(accumulated * scale, nan=0.0, posinf=1.0, neginf=0.0)
    corrected = np.sqrt(np.clip(averaged, 0.0, None))
    return (256 * np.clip(corrected, 0.0, 0.999)).astype(np.uint8)

def reinhard_tone_mapping(accumulated: np.ndarray, samples_per_pixel: int = 1,
                          exposure: float = 1.0, white_point: float = 1.0,
                          gamma: float = 2.2) -> np.ndarray:
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.nan_to_num(accumulated / samples_per_pixel, nan=0.0) * exposure
    scaled = np.clip(scaled, 0.0, None)
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    output = (mapped * 255).clip(0, 255).astype("uint8")
    return output

def auto_exposure_tone_mapping(accumulated: np.ndarray, samples_per_pixel: int = 1,
                               gamma: float = 2.2, target_midgray: float = 0.18) -> np.ndarray:
    """
    Compute an exposure value based on the average scene luminance and then
    apply Reinhard tone mapping.
    """
    averaged = np.nan_to_num(accumulated / samples_per_pixel, nan=0.0)
    luminance = 0.2126 * averaged[:, :, 0] + 0.7152 * averaged[:, :, 1] + 0.0722 * averaged[:, :, 2]
    avg_lum = luminance.mean() + 1e-5  # avoid division by zero
    exposure = target_midgray / avg_lum
    return reinhard_tone_mapping(accumulated, samples_per_pixel, exposure=exposure,
                                 white_point=1.0, gamma=gamma)

TONE_MAPPERS = {
    "gamma": gamma_correct,
    "reinhard": reinhard_tone_mapping,
    "auto": auto_exposure_tone_mapping,
}
