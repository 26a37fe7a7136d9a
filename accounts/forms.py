from django import forms
from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth.password_validation import validate_password

UserModel = get_user_model()


class LoginForm(forms.Form):
    """Sign in with either a username or an email address."""
    username = forms.CharField(required=False)
    email = forms.EmailField(required=False)
    password = forms.CharField(widget=forms.PasswordInput)

    def __init__(self, *args, **kwargs):
        self.request = kwargs.pop('request', None)
        super().__init__(*args, **kwargs)

    def clean(self):
        cleaned_data = super().clean()
        username = cleaned_data.get('username')
        email = cleaned_data.get('email')
        password = cleaned_data.get('password')

        if not username and email:
            match = UserModel.objects.filter(email__iexact=email).first()
            username = match.username if match else None

        if not (username or email):
            raise forms.ValidationError("Username or email is required")

        if username and password:
            user = authenticate(request=self.request, username=username, password=password)
            if not user:
                raise forms.ValidationError("Invalid login credentials")
            cleaned_data['user'] = user
        elif password:
            raise forms.ValidationError("Invalid login credentials")
        return cleaned_data


class RegisterForm(forms.ModelForm):
    password = forms.CharField(widget=forms.PasswordInput)

    class Meta:
        model = UserModel
        fields = ['username', 'email', 'first_name', 'last_name']

    def clean_email(self):
        email = self.cleaned_data.get('email')
        if not email:
            raise forms.ValidationError("Email is required")
        if UserModel.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError("Email already registered")
        return email

    def clean(self):
        cleaned_data = super().clean()
        password = cleaned_data.get('password')
        if password:
            user = UserModel(
                username=cleaned_data.get('username', ''),
                email=cleaned_data.get('email', ''),
            )
            try:
                validate_password(password, user=user)
            except forms.ValidationError as e:
                self.add_error('password', e)
        return cleaned_data

    def save(self, commit=True):
        user = super().save(commit=False)
        user.set_password(self.cleaned_data['password'])
        if commit:
            user.save()
        return user
