"""All CSS strings for the pman dashboard."""


APP_CSS = """
Screen {
    background: #000000;
    overflow: hidden;
    scrollbar-size: 0 0;
}

#title-bar {
    height: 1;
    background: #0a1a2a;
    color: #00d7d7;
    padding: 0 1;
}

#title-text {
    width: auto;
    color: #00d7d7;
    text-style: bold;
    margin: 0 2 0 0;
}

#view-tabs {
    width: 1fr;
}

#header-line {
    height: 1;
    padding: 0 1;
    background: #050f15;
    color: #3a5a5a;
    margin: 0 0 1 0;
}

#view-body {
    height: 1fr;
    padding: 0 1;
    overflow: hidden hidden;
}

#footer-line {
    dock: bottom;
    height: 1;
    padding: 0 1;
    background: #0a1a2a;
    color: #cccccc;
}
"""


POPUP_CSS = """
PopupScreen {
    align: center middle;
    background: #000000 50%;
}

#popup-box {
    width: 64;
    max-width: 90%;
    height: auto;
    background: #050a0e;
}
"""
