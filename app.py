from src.soccer_api.soccer_api.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(app.config.get("API_PORT", 3001)), debug=bool(app.config.get("DEBUG")))
