import dataclasses
import json
import pathlib
import typing

import cattrs

from .commontypes import SettingsError

settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(pathlib.Path, str)
settings_converter.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: pathlib.Path
    combining_enabled: bool = True
    # Backspace over the last composing character is delivered as a space keypress chained before the delete.
    space_on_boundary_delete: bool = True

    def set_combining_enabled(self, enabled: bool):
        self.combining_enabled = enabled

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        with dest.open("w") as f:
            json.dump(raw, f, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        try:
            with src.open() as f:
                raw = json.load(f)
            if not isinstance(raw, dict):
                raise SettingsError(f"Expected a JSON object in {src}")
            raw["_path"] = src
            return settings_converter.structure(raw, cls)
        except (cattrs.BaseValidationError, cattrs.errors.ForbiddenExtraKeysError, ValueError, OSError) as exc:
            raise SettingsError(f"Unable to load settings from {src}") from exc

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "_path": "test.settings.json",
                "combining_enabled": True,
                "space_on_boundary_delete": True,
            },
            cls,
        )


settings_converter.register_structure_hook(
    Settings, cattrs.gen.make_dict_structure_fn(Settings, settings_converter, _cattrs_forbid_extra_keys=True)
)
