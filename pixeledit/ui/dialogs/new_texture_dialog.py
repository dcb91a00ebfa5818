"""
New Texture Dialog
Asks for the dimensions of a blank texture.
"""

from PySide6.QtWidgets import (
    QDialog, QDialogButtonBox, QFormLayout, QLabel, QSpinBox, QVBoxLayout
)

from pixeledit import config


class NewTextureDialog(QDialog):
    """Modal prompt for the width and height of a new texture."""

    def __init__(self, width: int = config.DEFAULT_TEX_SIZE, height: int = config.DEFAULT_TEX_SIZE, parent=None):
        super().__init__(parent)
        self.setWindowTitle("New Texture")
        self.setModal(True)
        self.setMinimumWidth(300)

        self.width_spin = self._size_spin(width)
        self.height_spin = self._size_spin(height)

        form = QFormLayout()
        form.addRow("Width:", self.width_spin)
        form.addRow("Height:", self.height_spin)

        self.summary_label = QLabel()
        self.summary_label.setStyleSheet("QLabel { color: #0066cc; font-weight: bold; }")

        note = QLabel("<i>Replaces the current texture. Unsaved changes are lost.</i>")
        note.setWordWrap(True)
        note.setStyleSheet("QLabel { color: #666; }")

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        buttons.button(QDialogButtonBox.StandardButton.Ok).setText("Create")
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addWidget(self.summary_label)
        layout.addWidget(note)
        layout.addWidget(buttons)

        self.width_spin.valueChanged.connect(self._update_summary)
        self.height_spin.valueChanged.connect(self._update_summary)
        self._update_summary()

    @staticmethod
    def _size_spin(value: int) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(1, config.MAX_TEX_SIZE)
        spin.setValue(value)
        spin.setSuffix(" px")
        return spin

    def _update_summary(self):
        w, h = self.get_dimensions()
        self.summary_label.setText(f"{w} x {h} pixels ({w * h:,} total)")

    def get_dimensions(self):
        """Returns the chosen (width, height) in pixels."""
        return (self.width_spin.value(), self.height_spin.value())
