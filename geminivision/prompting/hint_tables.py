"""Categorical hint tables for prompt composition.

Each table maps a category key to the short descriptive clause appended to the
base prompt. Tables are pure data; `prompt_builder` owns ordering and sentinel
handling.
"""


ASPECT_RATIO_HINTS = {
    "square": "square image, 1:1 aspect ratio",
    "landscape": "landscape orientation, 16:9 aspect ratio, wide image",
    "portrait": "portrait orientation, 9:16 aspect ratio, tall image",
}

STYLE_HINTS = {
    "photorealistic": "photorealistic style, hyperrealistic, 8k",
    "digital art": "digital art, concept art, vibrant colors",
    "cartoon": "cartoon style",
    "abstract": "abstract art, non-representational, geometric patterns",
    "impressionistic": "impressionistic painting, visible brushstrokes, soft light",
    "fantasy": "fantasy art, epic, magical, mythical creatures",
    "anime": "anime style, Japanese animation, cel shaded",
    "isometric": "isometric view, 3D perspective, clean lines",
    "pixelart": "pixel art style, retro game graphics, 8-bit",
    "watercolor": "watercolor painting, soft washes, blended colors",
    "surreal": "surrealistic style, dreamlike, bizarre imagery",
    "minimalist": "minimalist style, simple, clean, uncluttered",
    "steampunk": "steampunk style, victorian technology, gears and cogs",
}

# "standard" is kept so option listings stay complete; the composer never emits it.
QUALITY_HINTS = {
    "standard": "good quality, clear image",
    "high": "high quality, detailed, sharp focus, intricate details",
    "ultra": (
        "ultra high quality, extremely detailed, masterpiece, "
        "professional lighting, 8k resolution, fine art"
    ),
}

LIGHTING_HINTS = {
    "cinematic": "cinematic lighting, dramatic shadows, high contrast",
    "natural": "natural lighting, soft shadows, realistic light",
    "studio": "studio lighting, controlled illumination, softbox light",
    "ambient": "ambient occlusion, soft indirect lighting, global illumination",
    "backlit": "backlit, rim lighting, silhouette effect",
    "volumetric": "volumetric lighting, light rays, atmospheric haze",
    "moody": "moody lighting, dark, mysterious atmosphere",
}

COLOR_SCHEME_HINTS = {
    "vibrant": "vibrant colors, highly saturated, rich hues",
    "monochrome": "monochrome, black and white, grayscale",
    "pastel": "pastel colors, soft tones, muted palette",
    "warm": "warm color palette, reds, oranges, yellows",
    "cool": "cool color palette, blues, greens, purples",
    "neon": "neon colors, glowing, fluorescent, cyberpunk aesthetic",
    "sepia": "sepia tone, vintage, brownish tint",
}

CAMERA_VIEW_HINTS = {
    "eye_level": "eye-level shot, standard perspective",
    "close_up": "close-up shot, detailed view",
    "medium_shot": "medium shot, waist up",
    "full_shot": "full shot, full body in frame",
    "wide_shot": "wide shot, landscape, establishing shot",
    "macro": "macro shot, extreme close-up, tiny details",
    "birds_eye": "bird's eye view, top-down perspective, overhead shot",
    "low_angle": "low angle shot, looking up, worm's eye view",
    "high_angle": "high angle shot, looking down",
    "dutch_angle": "dutch angle, tilted camera, canted angle",
}
