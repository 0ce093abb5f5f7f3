"""Validation script to check if everything is set up correctly."""
import sys
from pathlib import Path

def validate_structure():
    """Validate project structure."""
    print("🔍 Validating project structure...")
    
    required_files = [
        "gamethink/main.py",
        "gamethink/mcp_server.py",
        "gamethink/config.py",
        "gamethink/core/tracker.py",
        "gamethink/core/formatter.py",
        "gamethink/core/tools.py",
        "gamethink/models/internal.py",
        "gamethink/models/protocol.py",
        "gamethink/utils/logging.py",
        "config.yaml",
    ]
    
    all_exist = True
    for file in required_files:
        path = Path(file)
        if path.exists():
            print(f"  ✅ {file}")
        else:
            print(f"  ❌ {file} - MISSING")
            all_exist = False
    
    return all_exist

def validate_imports():
    """Validate all imports work."""
    print("\n🔍 Validating imports...")
    
    for module in ("fastapi", "uvicorn", "structlog", "yaml", "pydantic_settings", "mcp"):
        try:
            __import__(module)
            print(f"  ✅ {module}")
        except ImportError as e:
            print(f"  ❌ {module} - {e}")
            return False
    
    try:
        from gamethink.config import app_config, settings
        print("  ✅ gamethink.config")
    except Exception as e:
        print(f"  ❌ gamethink.config - {e}")
        return False
    
    try:
        from gamethink.core import ThoughtTracker, ToolDispatcher
        print("  ✅ gamethink.core")
    except Exception as e:
        print(f"  ❌ gamethink.core - {e}")
        return False
    
    try:
        from gamethink.models import ToolCallRequest, ToolCallResponse
        print("  ✅ gamethink.models")
    except Exception as e:
        print(f"  ❌ gamethink.models - {e}")
        return False
    
    return True

def validate_config():
    """Validate configuration."""
    print("\n🔍 Validating configuration...")
    
    try:
        from gamethink.config import app_config, settings
        
        assert app_config.tool.name
        print(f"  ✅ Tool name: {app_config.tool.name}")
        
        assert app_config.tool.description.strip()
        print("  ✅ Tool description set")
        
        print(f"  ✅ Server: {app_config.server.name} {app_config.server.version}")
        print(f"  ✅ Diagnostic rendering enabled: {app_config.formatter.enabled}")
        print(f"  ✅ Log level: {settings.log_level} ({settings.log_format})")
        
        return True
        
    except Exception as e:
        print(f"  ❌ Configuration error: {e}")
        return False

def validate_app():
    """Try to build the FastAPI app and the MCP server."""
    print("\n🔍 Validating servers...")
    
    try:
        from gamethink.main import create_app
        app = create_app()
        print("  ✅ FastAPI app built successfully")
        
        # Check endpoints
        routes = [route.path for route in app.routes]
        required_routes = ["/health", "/v1/tools", "/v1/tools/call"]
        
        for route in required_routes:
            if route in routes:
                print(f"  ✅ Route {route} registered")
            else:
                print(f"  ❌ Route {route} missing")
                return False
        
    except Exception as e:
        print(f"  ❌ Failed to build app: {e}")
        return False
    
    try:
        from gamethink.config import app_config
        from gamethink.core import ToolDispatcher, build_tracker
        from gamethink.mcp_server import create_server
        server = create_server(ToolDispatcher(build_tracker(app_config), app_config.tool))
        print(f"  ✅ MCP server built: {server.name}")
    except Exception as e:
        print(f"  ❌ Failed to build MCP server: {e}")
        return False
    
    return True

def main():
    """Main validation."""
    print("=" * 60)
    print("🚀 GAME DESIGN THINKING SERVER VALIDATION")
    print("=" * 60)
    
    results = []
    
    # Run validations
    results.append(("Project Structure", validate_structure()))
    results.append(("Python Imports", validate_imports()))
    results.append(("Configuration", validate_config()))
    results.append(("Servers", validate_app()))
    
    # Summary
    print("\n" + "=" * 60)
    print("📊 VALIDATION SUMMARY")
    print("=" * 60)
    
    all_passed = True
    for name, passed in results:
        status = "✅ PASS" if passed else "❌ FAIL"
        print(f"{name:20} {status}")
        if not passed:
            all_passed = False
    
    print("=" * 60)
    
    if all_passed:
        print("\n✅ ALL VALIDATIONS PASSED!")
        print("\n📝 Next steps:")
        print("1. MCP over stdio: gamethink-mcp")
        print("2. HTTP: gamethink-http")
        print("3. Tests: pytest")
        print("4. Smoke test a running HTTP server: python quick_test.py")
    else:
        print("\n❌ SOME VALIDATIONS FAILED!")
        print("Please fix the issues above before running the server.")
        sys.exit(1)

if __name__ == "__main__":
    main()
