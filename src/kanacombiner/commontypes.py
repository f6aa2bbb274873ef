class KanaCombinerError(Exception):
    pass


class SettingsError(KanaCombinerError):
    pass
