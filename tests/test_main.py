import os

import main


def test_launcher_runs_streamlit_front_end():
    command = main._streamlit_command(8765)
    assert command[1:4] == ["-m", "streamlit", "run"]
    assert command[4] == os.path.join(main.BASE_DIR, "submission_form", "streamlit_app.py")
    assert os.path.exists(command[4])
    assert command[command.index("--server.port") + 1] == "8765"
    assert command[command.index("--server.headless") + 1] == "true"
