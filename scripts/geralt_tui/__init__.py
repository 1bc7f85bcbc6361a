"""
geralt TUI - terminal front-end for the geralt task manager.

Architecture:
- task_source.py: Access to the geralt executable (protocol + subprocess implementation)
- line_parser.py: Task id / completion state from rendered lines
- buffer.py, renderer.py: View buffers and how they are rendered and refreshed
- commands.py, keymap.py: Command dispatch and the key table
- views/: Textual screen/widget components
- app.py: Main application entry point

Extensibility points:
1. New data sources: Implement the TaskSource protocol
2. New commands: Add a dispatcher method, an action on ViewScreen, and a keymap entry
"""
