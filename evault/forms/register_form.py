from wtforms import StringField, PasswordField, SubmitField
from wtforms.validators import InputRequired, Length, EqualTo, ValidationError
from flask_wtf import FlaskForm


class RegisterForm(FlaskForm):
    email = StringField(validators=[InputRequired(), Length(min=3, max=254)], render_kw={"placeholder": "Email"})
    password = PasswordField(validators=[InputRequired(), Length(min=6, max=128)], render_kw={"placeholder": "Password"})
    confirm = PasswordField(validators=[InputRequired(), EqualTo("password", message="Passwords must match.")],
                            render_kw={"placeholder": "Confirm password"})
    submit = SubmitField("Sign Up")

    def validate_email(self, email):
        if "@" not in email.data:
            raise ValidationError("Enter a valid email address.")
