import eventlet
eventlet.monkey_patch()

from imt_fitness import create_app  # noqa: E402
from imt_fitness.extensions import socketio  # noqa: E402

app = create_app()

if __name__ == '__main__':
    socketio.run(app, debug=app.config.get('DEBUG', False), port=5002)
