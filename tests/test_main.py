"""
End-to-end tests: stdin in, stdout out, through main().
"""

import io
import json

from smarthome.main import main
from smarthome.settings import LOG_LEVEL_ENV, SETTINGS_ENV


def run_console(monkeypatch, capsys, text):
    monkeypatch.setattr('sys.stdin', io.StringIO(text))
    code = main()
    return code, capsys.readouterr().out.splitlines()


class TestConsole:

    def setup_method(self):
        self.session = "\n".join([
            "TurnOn Light 2",
            "TurnOn Camera 2",
            "SetTemperature Heater 6 10",
            "SetTemperature Heater 6 25",
            "StartCharging Heater 7",
            "end please",
            "DisplayAllStatus",
            "end",
            "TurnOff Light 0",
        ]) + "\n"

    def test_session(self, monkeypatch, capsys):
        monkeypatch.delenv(SETTINGS_ENV, raising=False)
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        code, out = run_console(monkeypatch, capsys, self.session)

        assert code == 0
        assert out[:5] == [
            "Light 2 is already on",
            "The smart device was not found",
            "Heater 6 temperature should be in the range [15, 30]",
            "Heater 6 temperature is set to 25",
            "Heater 7 is not chargeable",
        ]
        assert out[5] == "Invalid command"
        status = out[6:]
        assert len(status) == 10
        assert status[6] == "Heater 6 is ON and the temperature is 25."
        assert status[7] == "Heater 7 is ON and the temperature is 20."

    def test_end_of_input_exits_cleanly(self, monkeypatch, capsys):
        monkeypatch.delenv(SETTINGS_ENV, raising=False)
        code, out = run_console(monkeypatch, capsys, "TurnOff Light 0\n")
        assert code == 0
        assert out == ["Light 0 is off"]

    def test_settings_from_environment(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / 'small.json'
        path.write_text(json.dumps({'devices': {
            'light': {'count': 1},
            'camera': {'count': 1, 'angle': 0},
            'heater': {'count': 0},
        }}))
        monkeypatch.setenv(SETTINGS_ENV, str(path))
        code, out = run_console(monkeypatch, capsys, "DisplayAllStatus\nTurnOn Heater 2\nend\n")
        assert code == 0
        assert out == [
            "Light 0 is ON, the color is YELLOW, the charging status is false, and the brightness level is LOW.",
            "Camera 1 is ON, the angle is 0, the charging status is false, and the recording status is false.",
            "The smart device was not found",
        ]

    def test_diagnostics_stay_off_stdout(self, monkeypatch, capsys):
        monkeypatch.delenv(SETTINGS_ENV, raising=False)
        monkeypatch.setenv(LOG_LEVEL_ENV, 'DEBUG')
        code, out = run_console(monkeypatch, capsys, "Bogus\nend\n")
        assert out == ["Invalid command"]
