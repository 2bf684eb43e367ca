from wtforms import TextAreaField, SubmitField
from wtforms.validators import InputRequired
from flask_wtf import FlaskForm


class DownloadForm(FlaskForm):
    private_key = TextAreaField("Private Key", validators=[InputRequired()],
                                render_kw={"placeholder": "Enter your private key to decrypt the file", "rows": 3})
    submit = SubmitField("Download")


class DeleteForm(FlaskForm):
    submit = SubmitField("Delete")
