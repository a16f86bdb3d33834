"""Materials, textures and image texture loading."""
