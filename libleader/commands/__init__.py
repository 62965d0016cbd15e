from pathlib import Path

p = Path(Path(__file__).parent)
modules = list(p.glob('*.py'))
modules = sorted(f.stem for f in modules if f.is_file() and not str(f.name) == '__init__.py')
__all__ = modules
