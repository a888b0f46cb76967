# --------------------------------------------------------------
# File: Home.py
# Description: Página de Streamlit para cifrar y descifrar archivos subidos.
# --------------------------------------------------------------

import streamlit as st

from encryptor.crypto_aead import new_nonce
from encryptor.errors import (
    AuthenticationFailure,
    InvalidKeyLength,
    InvalidNonceFormat,
    InvalidNonceLength,
    MalformedContainer,
)
from encryptor.files import decrypt_file, decrypted_name, encrypt_file, encrypted_name
from encryptor.validators import format_nonce, parse_nonce

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="AEAD File Encryptor", page_icon="🔐", layout="centered")

st.title("🔐 AEAD File Encryptor")
st.write("Cifrado AES-GCM de archivos: la contraseña es la clave y el nonce lo guardas tú.")
st.warning("No reutilices un nonce con la misma contraseña para archivos distintos.")

if st.button("🎲 Generar nonce aleatorio"):
    st.session_state["nonce_text"] = format_nonce(new_nonce())

f = st.file_uploader("Selecciona un archivo", type=None)
password = st.text_input("Contraseña (16, 24 o 32 caracteres ASCII)", type="password")
nonce_text = st.text_input("Nonce (array JSON de 12 enteros)", key="nonce_text")
mode = st.radio("Operación", ["Cifrar", "Descifrar"], horizontal=True)

if f and st.button("Ejecutar"):
    data = f.read()
    try:
        nonce = parse_nonce(nonce_text)
        if mode == "Cifrar":
            result = encrypt_file(password.encode("utf-8"), nonce, data)
            out_name = encrypted_name(f.name).name
        else:
            result = decrypt_file(password.encode("utf-8"), nonce, data)
            out_name = decrypted_name(f.name).name
    except (InvalidKeyLength, InvalidNonceLength, InvalidNonceFormat) as exc:
        st.error(f"Entrada inválida: {exc}")
    except MalformedContainer as exc:
        st.error(f"Archivo corrupto o truncado: {exc}")
    except AuthenticationFailure as exc:
        st.error(f"Error de descifrado: {exc}")
    else:
        st.success(f"{mode} completado: {len(result)} bytes.")
        st.download_button(
            f"⬇️ Descargar {out_name}",
            data=result,
            file_name=out_name,
            mime="application/octet-stream",
        )
