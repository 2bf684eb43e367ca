from wtforms import StringField, PasswordField, SubmitField
from wtforms.validators import InputRequired, Length
from flask_wtf import FlaskForm


class LoginForm(FlaskForm):
    email = StringField(validators=[InputRequired(), Length(min=3, max=254)], render_kw={"placeholder": "Email"})
    password = PasswordField(validators=[InputRequired(), Length(min=6, max=128)], render_kw={"placeholder": "Password"})
    submit = SubmitField("Login")
