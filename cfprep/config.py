"""
cfprep configuration
====================
All the constants of the augmentation and debug artifact code live here.

Usage:
    from cfprep.config import CONFIG, get
    angles = CONFIG['augment']['rotation_angles']
    prefix = get('sink.rotated_prefix')
"""

CONFIG = {

    # =================================================================
    # Training sample augmentation
    # =================================================================
    'augment': {
        # radians, 绕图像中心旋转
        'rotation_angles': (
            0.02, -0.02, 0.05, -0.05, 0.07, -0.07, 0.09, -0.09,
            1.1, -1.1, 1.3, -1.3, 1.5, -1.5, 2.0, -2.0,
        ),
        # 以图像中心为锚点进行缩放
        'scale_factors': (0.8, 0.9, 1.1, 1.2),
        # degrees, random_rotation 的默认范围 [-180 / 16, 180 / 16]
        'random_max_degrees': 180 / 16,
        # exposed pixels are filled with this intensity
        'border_value': 0,
    },

    # =================================================================
    # Debug artifacts
    # =================================================================
    'sink': {
        'rotated_prefix': 'training_frame_rotated_theta_',
        'scaled_prefix': 'training_frame_scaled_',
        'extension': '.png',
    },
}


def get(path, default=None):
    """
    Get a config value by dot-separated path.

    Usage:
        get('augment.scale_factors')   → (0.8, 0.9, 1.1, 1.2)
        get('sink.extension')          → '.png'
    """
    keys = path.split('.')
    val = CONFIG
    for key in keys:
        if isinstance(val, dict) and key in val:
            val = val[key]
        else:
            return default
    return val
