#!/usr/bin/env python3
"""
Main server entry point for the Wedding Planner
"""

if __name__ == '__main__':
    print("🚀 Starting Wedding Planner server...")
    from weddingplanner.app import app
    print("🌐 Server starting on http://localhost:5000")
    app.run(debug=True, host='0.0.0.0', port=5000)
