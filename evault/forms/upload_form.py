from wtforms import TextAreaField, SubmitField
from wtforms.validators import InputRequired
from flask_wtf.file import FileField, FileRequired
from flask_wtf import FlaskForm


class UploadForm(FlaskForm):
    file = FileField("File", validators=[FileRequired()])
    public_key = TextAreaField("Public Key", validators=[InputRequired()],
                               render_kw={"placeholder": "Enter your public key", "rows": 3})
    submit = SubmitField("Upload File")
