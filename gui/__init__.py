"""Desktop front-end for the business directory.

Tk-free modules (controller, state, status, rendering, utils.geometry) hold the
application logic so they can be imported in headless test runs. Widgets live
under `gui.app`, `gui.views` and `gui.components`.
"""
