from .descriptor_repository import load_descriptor, resolve_descriptor_path, save_minified

__all__ = ["load_descriptor", "resolve_descriptor_path", "save_minified"]
