"""
Configuration settings for the path tracer.

Settings are resolved in three layers: RENDER_SETTINGS defaults, then the
selected scene preset, then an optional quality level and explicit
overrides (usually command-line flags).
"""
from typing import Any, Dict, Optional

# Rendering settings
RENDER_SETTINGS = {
    'aspect_ratio': 16.0 / 9.0,
    'image_width': 400,
    'samples_per_pixel': 100,
    'max_depth': 50,
    'output': 'output.png',
    'tone_map': 'gamma',
    'seed': None,
    'texture': None,
}

# Camera defaults shared by all scenes
CAMERA_SETTINGS = {
    'look_from': (13.0, 2.0, 3.0),
    'look_at': (0.0, 0.0, 0.0),
    'vup': (0.0, 1.0, 0.0),
    'vfov': 40.0,
    'aperture': 0.0,
    'focus_dist': 10.0,
    'time0': 0.0,
    'time1': 1.0,
    'background': (0.7, 0.8, 1.0),
}

# Per-scene camera and image overrides
SCENE_PRESETS: Dict[str, Dict[str, Any]] = {
    'random': {
        'vfov': 20.0,
        'aperture': 0.1,
    },
    'two_spheres': {
        'vfov': 20.0,
    },
    'two_perlin_spheres': {
        'vfov': 20.0,
    },
    'earth': {
        'vfov': 20.0,
    },
    'simple_light': {
        'samples_per_pixel': 400,
        'background': (0.0, 0.0, 0.0),
        'look_from': (26.0, 3.0, 6.0),
        'look_at': (0.0, 2.0, 0.0),
        'vfov': 20.0,
    },
    'cornell_box': {
        'aspect_ratio': 1.0,
        'image_width': 600,
        'samples_per_pixel': 200,
        'background': (0.0, 0.0, 0.0),
        'look_from': (278.0, 278.0, -800.0),
        'look_at': (278.0, 278.0, 0.0),
        'vfov': 40.0,
    },
    'cornell_smoke': {
        'aspect_ratio': 1.0,
        'image_width': 600,
        'samples_per_pixel': 200,
        'background': (0.0, 0.0, 0.0),
        'look_from': (278.0, 278.0, -800.0),
        'look_at': (278.0, 278.0, 0.0),
        'vfov': 40.0,
    },
    'final': {
        'aspect_ratio': 1.0,
        'image_width': 800,
        'samples_per_pixel': 10000,
        'background': (0.0, 0.0, 0.0),
        'look_from': (478.0, 278.0, -600.0),
        'look_at': (278.0, 278.0, 0.0),
        'vfov': 40.0,
    },
}

# Sample and bounce budgets that override the scene's own
QUALITY_LEVELS = {
    'preview': {'samples_per_pixel': 10, 'max_depth': 10, 'scale': 0.5},
    'balanced': {'samples_per_pixel': 50, 'max_depth': 25, 'scale': 0.75},
    'final': {'samples_per_pixel': None, 'max_depth': None, 'scale': 1.0},
}

DEFAULT_SCENE = 'final'


def resolve_settings(scene: str, quality: Optional[str] = None,
                     overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Merge defaults, the scene preset, a quality level and overrides.

    Override values of None are ignored so unset command-line flags keep the
    preset value.
    """
    if scene not in SCENE_PRESETS:
        raise ValueError(f"Unknown scene: {scene}")

    settings: Dict[str, Any] = {'scene': scene}
    settings.update(RENDER_SETTINGS)
    settings.update(CAMERA_SETTINGS)
    settings.update(SCENE_PRESETS[scene])

    if quality is not None:
        if quality not in QUALITY_LEVELS:
            raise ValueError(f"Unknown quality level: {quality}")
        level = QUALITY_LEVELS[quality]
        if level['samples_per_pixel'] is not None:
            settings['samples_per_pixel'] = level['samples_per_pixel']
        if level['max_depth'] is not None:
            settings['max_depth'] = level['max_depth']
        settings['image_width'] = max(1, int(settings['image_width'] * level['scale']))

    for key, value in (overrides or {}).items():
        if value is not None:
            settings[key] = value

    settings['image_height'] = max(1, int(settings['image_width'] / settings['aspect_ratio']))
    return settings
