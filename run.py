from climbsafe.application import create_app

app = create_app()

if __name__ == '__main__':
    # Port 5001 avoids the AirPlay receiver on macOS
    app.run(debug=True, port=5001)
